"""Communication with the Sigpair server."""

import asyncio
import functools
import typing

import attr
import requests

from . import attrs_extra
from . import documents


class SigpairError(Exception):
    """Base class for errors raised by sigpair_admin."""


class MalformedResponseError(SigpairError):
    """Raised when the server responds successfully, but with an unexpected document."""


@attr.s
class SigpairServer:
    """HTTP client for the Sigpair server.

    Requests are performed by a requests.Session in the default executor of
    the running asyncio loop, so that they don't block other coroutines.
    """

    server_url = attr.ib(validator=attr.validators.instance_of(str))
    request_timeout = attr.ib(
        default=None,
        validator=attr.validators.optional(attr.validators.instance_of((int, float))))

    _session = attr.ib(default=None, init=False, repr=False)
    _log = attrs_extra.log('%s.SigpairServer' % __name__)

    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._session is None:
            return
        self._session.close()
        self._session = None

    async def post(self, url: str, *,
                   json: typing.Any = None,
                   headers: typing.Optional[typing.Mapping[str, str]] = None) -> requests.Response:
        return await self.client_request('POST', url, json=json, headers=headers)

    async def client_request(self, method: str, url: str, *,
                             json: typing.Any = None,
                             headers: typing.Optional[typing.Mapping[str, str]] = None
                             ) -> requests.Response:
        """Performs an HTTP request on the server, relative to the server URL.

        Does not check the response status; that's up to the caller.
        """

        abs_url = self.server_url + url
        self._log.debug('%s %s', method, abs_url)

        http_req = functools.partial(self.session().request, method, abs_url,
                                     json=json,
                                     headers=headers,
                                     timeout=self.request_timeout)
        loop = asyncio.get_running_loop()
        resp = await loop.run_in_executor(None, http_req)
        self._log.debug('%s %s: HTTP %d', method, abs_url, resp.status_code)
        return resp


def parse_create_user_response(resp: requests.Response) -> documents.CreateUserResponse:
    """Parses the response of /v1/create-user.

    Raises MalformedResponseError when the body isn't a JSON object with
    an integer 'user_id' field.
    """

    try:
        payload = resp.json()
    except ValueError as ex:
        raise MalformedResponseError('Response is not valid JSON: %s' % ex) from ex

    if not isinstance(payload, dict):
        raise MalformedResponseError('Response is not a JSON object: %r' % (payload,))
    if 'user_id' not in payload:
        raise MalformedResponseError('Response has no user_id field: %r' % (payload,))

    try:
        return documents.CreateUserResponse(user_id=payload['user_id'])
    except TypeError as ex:
        raise MalformedResponseError(str(ex)) from ex
