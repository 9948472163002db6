from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime


class _Out(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


# Eingaben: alle Felder optional, Pflichtfelder prüft services.py
class RegisterIn(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None

class LoginIn(BaseModel):
    email: str | None = None
    password: str | None = None

class PostIn(BaseModel):
    title: str | None = None
    content: str | None = None
    image: str | None = None

class CommentIn(BaseModel):
    content: str | None = None


class UserOut(_Out):
    id: int
    username: str
    email: str

class CommentAuthorOut(_Out):
    id: int
    username: str

class CommentOut(_Out):
    id: int
    content: str
    author: CommentAuthorOut
    created_at: datetime

class PostOut(_Out):
    id: int
    title: str
    content: str
    image: str | None = None
    author: UserOut
    comments: list[CommentOut] = []
    created_at: datetime
    updated_at: datetime


class RegisterOut(_Out):
    message: str
    user_id: int

class LoginOut(_Out):
    message: str
    user: UserOut
    token: str

class MessageOut(BaseModel):
    message: str

class UploadOut(_Out):
    image_url: str
