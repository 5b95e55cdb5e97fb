"""Classes for JSON documents used in upstream communication."""

import attr


def _strict_int(instance, attribute, value):
    """Validator for integers that refuses booleans."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("'%s' must be an integer, not %r" % (attribute.name, value))


@attr.s(frozen=True)
class CreateUserClaims:
    """Claims of the admin-signed token sent to /v1/create-user."""

    name = attr.ib(validator=attr.validators.instance_of(str))
    iat = attr.ib(validator=_strict_int)
    exp = attr.ib(validator=_strict_int)


@attr.s(frozen=True)
class UserTokenClaims:
    """Claims of the token that binds a user ID to their public key."""

    user_id = attr.ib(validator=_strict_int)
    iat = attr.ib(validator=_strict_int)
    exp = attr.ib(validator=_strict_int)
    public_key = attr.ib(validator=attr.validators.instance_of(str))


@attr.s(frozen=True)
class CreateUserResponse:
    """Response from the /v1/create-user endpoint."""

    user_id = attr.ib(validator=_strict_int)
