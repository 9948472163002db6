from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from blogapp.db.models import Comment, Post, utcnow

MAX_ID = 2**63 - 1

def _with_authors():
    return (
        joinedload(Post.author),
        selectinload(Post.comments).joinedload(Comment.author),
    )

def parse_id(raw) -> Optional[int]:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if 0 < value <= MAX_ID else None

def list_newest_first(db: Session) -> list[Post]:
    stmt = (
        select(Post)
        .options(*_with_authors())
        .order_by(Post.created_at.desc(), Post.id.desc())
    )
    return list(db.execute(stmt).unique().scalars().all())

def get(db: Session, post_id) -> Optional[Post]:
    pid = parse_id(post_id)
    if pid is None:
        return None
    stmt = (
        select(Post)
        .options(*_with_authors())
        .where(Post.id == pid)
        .execution_options(populate_existing=True)
    )
    return db.execute(stmt).unique().scalars().first()

def create(db: Session, author_id: int, title: str, content: str, image: Optional[str]) -> Post:
    now = utcnow()
    post = Post(author_id=author_id, title=title, content=content, image=image,
                created_at=now, updated_at=now)
    db.add(post)
    db.commit()
    return get(db, post.id)

def save(db: Session, post: Post) -> Post:
    db.add(post)
    db.commit()
    return get(db, post.id)

def delete(db: Session, post: Post) -> None:
    db.delete(post)
    db.commit()

def add_comment(db: Session, post: Post, author_id: int, content: str) -> Post:
    post.comments.append(Comment(author_id=author_id, content=content))
    return save(db, post)
