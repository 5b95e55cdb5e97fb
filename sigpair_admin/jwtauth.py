"""JWT token creation for user registration and user authentication."""

import datetime
import time

import attr
import jwt

from . import documents

JWT_ALGORITHM = 'HS256'
CREATE_USER_TOKEN_EXPIRY = datetime.timedelta(minutes=5)
USER_TOKEN_LIFETIME = datetime.timedelta(hours=1)


def _now() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())


def sign_claims(claims, secret: bytes) -> str:
    """Return the attrs claims document as JWT signed with the secret."""
    return jwt.encode(attr.asdict(claims), secret, algorithm=JWT_ALGORITHM)


def create_user_claims(user_name: str) -> documents.CreateUserClaims:
    iat = _now()
    expiry = int(CREATE_USER_TOKEN_EXPIRY.total_seconds())
    return documents.CreateUserClaims(name=user_name, iat=iat, exp=iat + expiry)


def user_token_claims(user_id: int, public_key: str,
                      lifetime: int) -> documents.UserTokenClaims:
    iat = _now()
    return documents.UserTokenClaims(
        user_id=user_id,
        iat=iat,
        exp=iat + lifetime,
        public_key=public_key,
    )


def new_create_user_token(admin_secret: bytes, user_name: str) -> str:
    """Return a new JWT that authorises creating the named user.

    The token is valid for CREATE_USER_TOKEN_EXPIRY.
    """
    return sign_claims(create_user_claims(user_name), admin_secret)


def new_user_token(admin_secret: bytes, user_id: int, public_key: str,
                   lifetime: int) -> str:
    """Return a new JWT binding the user ID to the public key.

    :param public_key: hex-encoded ed25519 public key, without '0x' prefix.
    :param lifetime: validity of the token in seconds.
    """
    return sign_claims(user_token_claims(user_id, public_key, lifetime), admin_secret)
