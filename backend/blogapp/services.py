import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blogapp.core.errors import AuthError, ConflictError, ForbiddenError, NotFoundError, ValidationError
from blogapp.core.security import Identity, hash_password, verify_password
from blogapp.db.crud import posts as post_crud
from blogapp.db.crud import users as user_crud
from blogapp.db.models import Post, User, utcnow
from blogapp.schemas import PostIn

log = logging.getLogger(__name__)

USERNAME_MIN, USERNAME_MAX = 3, 30
PASSWORD_MIN = 6
TITLE_MAX = 200


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


# ---------- users ----------

def register_user(db: Session, username: Optional[str], email: Optional[str], password: Optional[str]) -> User:
    username = _clean(username)
    email = _clean(email).lower()
    password = password or ""
    if not username or not email or not password:
        raise ValidationError("All fields are required")
    if not USERNAME_MIN <= len(username) <= USERNAME_MAX:
        raise ValidationError(f"Username must be between {USERNAME_MIN} and {USERNAME_MAX} characters")
    if len(password) < PASSWORD_MIN:
        raise ValidationError(f"Password must be at least {PASSWORD_MIN} characters")

    if user_crud.get_by_email_or_username(db, email, username):
        raise ConflictError("User already exists with this email or username")
    try:
        user = user_crud.create(db, email=email, username=username, password_hash=hash_password(password))
    except IntegrityError as e:
        # zwei gleichzeitige Registrierungen: die Unique-Constraint entscheidet
        db.rollback()
        raise ConflictError("User already exists with this email or username") from e
    log.info("Registered user id=%s username=%s", user.id, user.username)
    return user


def authenticate(db: Session, email: Optional[str], password: Optional[str]) -> User:
    email = _clean(email).lower()
    if not email or not password:
        raise ValidationError("Email and password are required")
    user = user_crud.get_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        log.info("Failed login for %s", email)
        raise AuthError("Invalid credentials")
    log.info("Login user id=%s", user.id)
    return user


def current_user(db: Session, identity: Identity) -> User:
    user = user_crud.get_by_id(db, identity.user_id)
    if user is None:
        raise AuthError("User not found")
    return user


# ---------- posts ----------

def list_posts(db: Session) -> list[Post]:
    return post_crud.list_newest_first(db)


def get_post(db: Session, post_id) -> Post:
    post = post_crud.get(db, post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def create_post(db: Session, identity: Identity, data: PostIn) -> Post:
    title, content = _clean(data.title), _clean(data.content)
    if not title or not content:
        raise ValidationError("Title and content are required")
    if len(title) > TITLE_MAX:
        raise ValidationError(f"Title must be at most {TITLE_MAX} characters")
    author = current_user(db, identity)
    post = post_crud.create(db, author_id=author.id, title=title, content=content,
                            image=_clean(data.image) or None)
    log.info("Post %s created by user %s", post.id, author.id)
    return post


def _owned_post(db: Session, identity: Identity, post_id, action: str) -> Post:
    post = get_post(db, post_id)
    if post.author_id != identity.user_id:
        log.warning("User %s may not %s post %s", identity.user_id, action, post.id)
        raise ForbiddenError("Unauthorized")
    return post


def update_post(db: Session, identity: Identity, post_id, data: PostIn) -> Post:
    post = _owned_post(db, identity, post_id, "update")
    if data.title is not None:
        title = _clean(data.title)
        if not title:
            raise ValidationError("Title cannot be empty")
        if len(title) > TITLE_MAX:
            raise ValidationError(f"Title must be at most {TITLE_MAX} characters")
        post.title = title
    if data.content is not None:
        content = _clean(data.content)
        if not content:
            raise ValidationError("Content cannot be empty")
        post.content = content
    # leeres Bild -> bisheriges Bild behalten
    if _clean(data.image):
        post.image = _clean(data.image)
    post.updated_at = utcnow()
    post = post_crud.save(db, post)
    log.info("Post %s updated by user %s", post.id, identity.user_id)
    return post


def delete_post(db: Session, identity: Identity, post_id) -> None:
    post = _owned_post(db, identity, post_id, "delete")
    post_crud.delete(db, post)
    log.info("Post %s deleted by user %s", post.id, identity.user_id)


def add_comment(db: Session, identity: Identity, post_id, content: Optional[str]) -> Post:
    content = _clean(content)
    if not content:
        raise ValidationError("Comment content is required")
    post = get_post(db, post_id)
    author = current_user(db, identity)
    post = post_crud.add_comment(db, post, author_id=author.id, content=content)
    log.info("Comment added to post %s by user %s", post.id, author.id)
    return post
