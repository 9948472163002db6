from typing import Generator, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from blogapp.core.config import Settings
from blogapp.core.errors import AuthError
from blogapp.core.security import Identity, decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)

def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def require_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Identity:
    if credentials is None or not credentials.credentials:
        raise AuthError("Access token required")
    return decode_access_token(credentials.credentials, settings)
