"""Admin actions on a Sigpair server: creating users and generating user tokens."""

import datetime
import typing

import attr
import requests

from . import attrs_extra
from . import hexkeys
from . import jwtauth
from . import upstream

# Unique user identifier, assigned by the Sigpair server.
UserId = int

ADMIN_TOKEN_LENGTH = 32  # bytes
CREATE_USER_ENDPOINT = '/v1/create-user'

# Token lifetime, as timedelta or in seconds.
Lifetime = typing.Union[int, float, datetime.timedelta]


def _default_server(admin: 'SigpairAdmin') -> upstream.SigpairServer:
    return upstream.SigpairServer(admin.base_url)


@attr.s(frozen=True)
class SigpairAdmin:
    """Performs admin actions, i.e. create users and generate user tokens.

    :param admin_token: the admin token of the Sigpair node, in hex. It
        should be 32 bytes long (64 characters), and may have a '0x' prefix.
    :param base_url: base URL of the Sigpair server.
    :param server: HTTP client for the server; constructed from base_url
        when not given.
    """

    admin_token = attr.ib(converter=hexkeys.decode_hex, repr=False)
    base_url = attr.ib(validator=attr.validators.instance_of(str))
    server = attr.ib(
        default=attr.Factory(_default_server, takes_self=True),
        validator=attr.validators.instance_of(upstream.SigpairServer),
        repr=False)

    _log = attrs_extra.log('%s.SigpairAdmin' % __name__)

    def __attrs_post_init__(self):
        if len(self.admin_token) != ADMIN_TOKEN_LENGTH:
            self._log.warning('Admin token is %d bytes, expected %d; the server will '
                              'probably not accept tokens signed with it.',
                              len(self.admin_token), ADMIN_TOKEN_LENGTH)

    async def create_user(self, user_name: str) -> UserId:
        """Creates a new user with the given name.

        :returns: the ID the server assigned to the new user.
        :raises requests.RequestException: when the server could not be
            reached or responded with a non-2xx status.
        :raises sigpair_admin.upstream.MalformedResponseError: when the
            response does not contain a user ID.
        """

        token = jwtauth.new_create_user_token(self.admin_token, user_name)

        try:
            resp = await self.server.post(
                CREATE_USER_ENDPOINT,
                json={},
                headers={'Authorization': 'Bearer %s' % token},
            )
            resp.raise_for_status()
            created = upstream.parse_create_user_response(resp)
        except (requests.RequestException, upstream.MalformedResponseError) as ex:
            self._log.error('Unable to create user %r: %s', user_name, ex)
            raise

        self._log.info('Created user %r with ID %d', user_name, created.user_id)
        return created.user_id

    def close(self) -> None:
        """Closes the HTTP session to the server, if one was opened."""
        self.server.close()

    def generate_user_token(self, user_id: UserId, user_pubkey: str,
                            lifetime: Lifetime = jwtauth.USER_TOKEN_LIFETIME) -> str:
        """Generates a token the user can use to perform all user actions.

        :param user_id: ID of the user to generate the token for.
        :param user_pubkey: ed25519 signing public key (32 bytes) of the user
            as hex string, with or without '0x' prefix.
        :param lifetime: lifetime of the token, as timedelta or in seconds.
            Fractions of seconds are truncated. Defaults to 1 hour.
        """

        if isinstance(lifetime, datetime.timedelta):
            lifetime = lifetime.total_seconds()
        public_key = hexkeys.strip_hex_prefix(user_pubkey)
        return jwtauth.new_user_token(self.admin_token, user_id, public_key, int(lifetime))
