from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blogapp import services
from blogapp.api.deps import get_db, get_settings, require_auth
from blogapp.core.config import Settings
from blogapp.core.security import Identity, create_access_token
from blogapp.schemas import LoginIn, LoginOut, RegisterIn, RegisterOut, UserOut

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/register", response_model=RegisterOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    user = services.register_user(db, payload.username, payload.email, payload.password)
    return RegisterOut(message="User created successfully", user_id=user.id)

@router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    user = services.authenticate(db, payload.email, payload.password)
    token = create_access_token(user.id, user.email, settings)
    return LoginOut(message="Login successful", user=UserOut.model_validate(user), token=token)

@router.get("/me", response_model=UserOut)
def me(identity: Identity = Depends(require_auth), db: Session = Depends(get_db)):
    return services.current_user(db, identity)
