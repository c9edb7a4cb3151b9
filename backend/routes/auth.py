# backend/routes/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import Settings
from database import get_db
from models.users import User
from schemas import user as schemas
from utils.audit import write_log, client_ip
from utils.hashing import get_password_hash, verify_password
from utils.tokenJWT import create_access_token, get_current_user_id

router = APIRouter(prefix="/api/auth", tags=["Auth"])
logger = logging.getLogger(__name__)


def _settings(request: Request) -> Settings:
    return request.app.state.settings


# Register a new user and hand back a token so the client can skip the login step
@router.post("/signup", response_model=schemas.AuthResponse)
def signup(payload: schemas.SignupRequest, request: Request, db: Session = Depends(get_db)):
    settings = _settings(request)
    email = payload.email

    if len(payload.password) < settings.PASSWORD_MIN_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long",
        )

    if db.query(User).filter(User.email == email).first():
        write_log(db, user_id=None, action="SIGNUP", resource="auth", status="FAIL",
                  ip=client_ip(request), meta={"email": email, "reason": "Email exists"})
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    new_user = User(name=payload.name, email=email, password_hash=get_password_hash(payload.password))
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent signup for the same email
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    db.refresh(new_user)

    write_log(db, user_id=new_user.id, action="SIGNUP", resource="auth", status="SUCCESS",
              ip=client_ip(request), meta={"email": new_user.email})

    token = create_access_token(new_user.id, settings)
    return {
        "success": True,
        "message": "User registered successfully",
        "user": schemas.UserResponse.model_validate(new_user),
        "token": token,
    }


# Authenticate user and issue JWT token
@router.post("/login", response_model=schemas.AuthResponse)
def login(payload: schemas.LoginRequest, request: Request, db: Session = Depends(get_db)):
    db_user = db.query(User).filter(User.email == payload.email).first()

    # Same answer for unknown email and wrong password
    if not db_user or not verify_password(payload.password, db_user.password_hash):
        write_log(db, user_id=(db_user.id if db_user else None), action="LOGIN", resource="auth",
                  status="FAIL", ip=client_ip(request), meta={"email": payload.email})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = create_access_token(db_user.id, _settings(request))

    write_log(db, user_id=db_user.id, action="LOGIN", resource="auth",
              status="SUCCESS", ip=client_ip(request), meta={"email": db_user.email})

    return {
        "success": True,
        "message": "Login successful",
        "user": schemas.UserResponse.model_validate(db_user),
        "token": token,
    }


# Retrieve current authenticated user details
@router.get("/me", response_model=schemas.MeResponse)
def me(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    db_user = db.get(User, user_id)
    if db_user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return {"success": True, "user": schemas.UserResponse.model_validate(db_user)}
