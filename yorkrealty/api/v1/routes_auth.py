# File: yorkrealty/api/v1/routes_auth.py

"""
Auth API routes.

Login only confirms credentials and returns the user summary; the browser
keeps its own "logged in" flag. No server session or token is issued.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from yorkrealty.api.deps import get_db
from yorkrealty.schemas.user import (
    LoginResponse,
    RegisterResponse,
    UserCreate,
    UserLogin,
    UserSummary,
)
from yorkrealty.services.auth_service import authenticate_user, register_user

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="User registration",
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    user = register_user(
        db,
        full_name=payload.full_name,
        email=payload.email,
        password=payload.password,
    )
    return RegisterResponse(user_id=user.id)


@router.post("/login", response_model=LoginResponse, summary="User login")
def login(payload: UserLogin, db: Session = Depends(get_db)):
    user = authenticate_user(db, email=payload.email, password=payload.password)
    return LoginResponse(user=UserSummary.model_validate(user))
