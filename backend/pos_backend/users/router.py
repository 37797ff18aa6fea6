from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from ..auth.service import AuthPayload, Username, get_password_hash, get_token_maker, require_owner, verify_password
from ..auth.token import TokenMaker
from ..core.database import StoreError, get_session
from ..core.responses import store_http_exception
from ..core.settings import settings
from ..models.User import LoginRequest, LoginResponse, UserCreate, UserResponse
from .service import create_user, get_user

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=UserResponse)
async def create_new_user(user: UserCreate, session: Session = Depends(get_session)):
    """
    Create a new account.
    """
    hashed_password = get_password_hash(user.password)
    try:
        return create_user(session, user.username, hashed_password)
    except StoreError as e:
        raise store_http_exception(e, unique_status=status.HTTP_403_FORBIDDEN)

@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    session: Session = Depends(get_session),
    token_maker: TokenMaker = Depends(get_token_maker),
):
    """
    Login with username and password to get an access token.
    """
    try:
        user = get_user(session, login_data.username)
    except StoreError as e:
        raise store_http_exception(e)

    if not verify_password(login_data.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = token_maker.create_token(
        user.username,
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        user_id=user.id,
    )
    return LoginResponse(access_token=access_token, user=UserResponse.model_validate(user, from_attributes=True))

@router.get("/{username}", response_model=UserResponse)
async def get_user_info(
    payload: AuthPayload,
    username: Username,
    session: Session = Depends(get_session),
):
    """
    Get account information. Users may only read their own account.
    """
    require_owner(payload, username)
    try:
        return get_user(session, username)
    except StoreError as e:
        raise store_http_exception(e)
