from functools import lru_cache
from typing import Annotated, Optional
from uuid import UUID
import logging

from fastapi import Depends, Header, HTTPException, Path, Request, status
from passlib.context import CryptContext

from ..core.settings import settings
from ..models.Token import TokenPayload
from .token import TokenError, TokenMaker

logger = logging.getLogger(__name__)

AUTHORIZATION_TYPE_BEARER = "bearer"
AUTHORIZATION_PAYLOAD_KEY = "auth_payload"

# Password hashing
pwd_context = CryptContext(
    schemes=["argon2"], 
    deprecated="auto",
    argon2__time_cost=2, 
    argon2__memory_cost=102400, 
    argon2__parallelism=8
)


class MissingOrMalformedHeaderError(Exception):
    pass


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password + settings.PASSWORD_PEPPER, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password + settings.PASSWORD_PEPPER)


@lru_cache
def get_token_maker() -> TokenMaker:
    return TokenMaker(settings.TOKEN_SECRET_KEY)


def unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def parse_authorization_header(authorization: Optional[str]) -> str:
    """
    Returns the token part of a "Bearer <token>" header value.
    """
    if not authorization:
        raise MissingOrMalformedHeaderError("authorization header is not provided")

    fields = authorization.split()
    if len(fields) != 2:
        raise MissingOrMalformedHeaderError("invalid authorization header format")

    authorization_type = fields[0].lower()
    if authorization_type != AUTHORIZATION_TYPE_BEARER:
        raise MissingOrMalformedHeaderError(f"unsupported authorization type {authorization_type}")

    return fields[1]


async def get_auth_payload(
    request: Request,
    token_maker: Annotated[TokenMaker, Depends(get_token_maker)],
    authorization: Annotated[Optional[str], Header()] = None,
) -> TokenPayload:
    """
    Dependency guarding every protected route.
    The verified claim is attached to request.state and returned to the handler.
    """
    try:
        token = parse_authorization_header(authorization)
        payload = token_maker.verify_token(token)
    except (MissingOrMalformedHeaderError, TokenError) as e:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, e)
        raise unauthorized(str(e))

    setattr(request.state, AUTHORIZATION_PAYLOAD_KEY, payload)
    return payload


def require_owner(payload: TokenPayload, *owners: str, user_id: Optional[UUID] = None) -> None:
    """
    Fails with 401 unless every owner named by the request is the token subject.
    When the request also names an account ID, it must be the one the token was issued for.
    """
    for owner in owners:
        if owner != payload.username:
            logger.warning("User '%s' tried to act on behalf of '%s'", payload.username, owner)
            raise unauthorized("unauthorized user")

    if user_id is not None and user_id != payload.user_id:
        logger.warning("User '%s' tried to act on account %s", payload.username, user_id)
        raise unauthorized("unauthorized user")


AuthPayload = Annotated[TokenPayload, Depends(get_auth_payload)]
Username = Annotated[str, Path(min_length=1, pattern=r"^[a-zA-Z0-9]+$")]
