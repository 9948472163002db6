from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import or_

from blogapp.db.models import User

def get_by_email_or_username(db: Session, email: str, username: str) -> Optional[User]:
    """Any user holding either the email or the username."""
    return db.query(User).filter(
        or_(User.email == email, User.username == username)
    ).first()

def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def get_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)

def create(db: Session, email: str, username: str, password_hash: str) -> User:
    user = User(email=email, username=username, password_hash=password_hash)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
