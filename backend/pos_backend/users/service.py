from sqlmodel import Session, select

from ..core.database import commit, fetch_one
from ..models.User import User

def create_user(session: Session, username: str, hashed_password: str) -> User:
    db_user = User(username=username, hashed_password=hashed_password)
    commit(session, db_user)
    return db_user

def get_user(session: Session, username: str) -> User:
    statement = select(User).where(User.username == username)
    return fetch_one(session, statement)
