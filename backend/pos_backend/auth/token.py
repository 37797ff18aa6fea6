from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID, uuid4

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from ..models.Token import TokenPayload

MIN_SECRET_KEY_SIZE = 32
ALGORITHM = "HS256"
ISSUER = "server"


class TokenError(Exception):
    pass


class InvalidKeySizeError(TokenError):
    def __init__(self):
        super().__init__(f"invalid key size: must be at least {MIN_SECRET_KEY_SIZE}")


class InvalidTokenError(TokenError):
    def __init__(self, message: str = "token is invalid"):
        super().__init__(message)


class ExpiredTokenError(TokenError):
    def __init__(self):
        super().__init__("token is expired")


def new_payload(username: str, duration: timedelta, user_id: Optional[UUID] = None) -> TokenPayload:
    now = datetime.now(timezone.utc)
    return TokenPayload(
        id=uuid4(),
        username=username,
        user_id=user_id,
        issued_at=now,
        expired_at=now + duration,
    )


class TokenMaker:
    """
    Issues and verifies HS256-signed access tokens.
    The secret is fixed for the lifetime of the maker.
    """

    def __init__(self, secret_key: str):
        if len(secret_key) < MIN_SECRET_KEY_SIZE:
            raise InvalidKeySizeError()
        self._secret_key = secret_key

    def create_token(self, username: str, duration: timedelta, user_id: Optional[UUID] = None) -> str:
        payload = new_payload(username, duration, user_id)

        to_encode = payload.model_dump(mode="json")
        to_encode.update({"iss": ISSUER, "exp": payload.expired_at})
        return jwt.encode(to_encode, self._secret_key, algorithm=ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        # Only HMAC-SHA256 is accepted. Anything else, "none" included, is rejected
        # before the signature is even looked at.
        try:
            header = jwt.get_unverified_header(token)
        except JWTError:
            raise InvalidTokenError()
        if header.get("alg") != ALGORITHM:
            raise InvalidTokenError()

        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                issuer=ISSUER,
            )
        except ExpiredSignatureError:
            raise ExpiredTokenError()
        except JWTError:
            raise InvalidTokenError()

        try:
            payload = TokenPayload.model_validate(claims)
        except ValidationError:
            raise InvalidTokenError()

        if payload.expired_at <= datetime.now(timezone.utc):
            raise ExpiredTokenError()
        return payload
