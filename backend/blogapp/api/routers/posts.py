from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blogapp import services
from blogapp.api.deps import get_db, require_auth
from blogapp.core.security import Identity
from blogapp.schemas import CommentIn, MessageOut, PostIn, PostOut

router = APIRouter(prefix="/api/posts", tags=["posts"])

@router.get("", response_model=list[PostOut])
def list_posts(db: Session = Depends(get_db)):
    return services.list_posts(db)

@router.post("", response_model=PostOut, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostIn, identity: Identity = Depends(require_auth), db: Session = Depends(get_db)):
    return services.create_post(db, identity, payload)

# post_id bleibt str: ungültige IDs sollen 404 liefern, nicht 400
@router.get("/{post_id}", response_model=PostOut)
def get_post(post_id: str, db: Session = Depends(get_db)):
    return services.get_post(db, post_id)

@router.put("/{post_id}", response_model=PostOut)
def update_post(post_id: str, payload: PostIn,
                identity: Identity = Depends(require_auth), db: Session = Depends(get_db)):
    return services.update_post(db, identity, post_id, payload)

@router.delete("/{post_id}", response_model=MessageOut)
def delete_post(post_id: str, identity: Identity = Depends(require_auth), db: Session = Depends(get_db)):
    services.delete_post(db, identity, post_id)
    return MessageOut(message="Post deleted successfully")

@router.post("/{post_id}/comments", response_model=PostOut)
def add_comment(post_id: str, payload: CommentIn,
                identity: Identity = Depends(require_auth), db: Session = Depends(get_db)):
    return services.add_comment(db, identity, post_id, payload.content)
