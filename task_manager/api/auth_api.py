from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from task_manager.auth.auth_handler import get_current_user, issue_token
from task_manager.configs.database import get_db
from task_manager.configs.settings import Settings, get_settings
from task_manager.schemas.token import Claims
from task_manager.schemas.user_schema import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from task_manager.services import user_service

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    user = user_service.create_user(db, body.username, body.email, body.password)
    return {
        "message": "User registered successfully",
        "token": issue_token(user, settings),
        "user": UserResponse.from_user(user),
    }


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    user = user_service.authenticate_user(db, body.email, body.password)
    return {
        "message": "Login successful",
        "token": issue_token(user, settings),
        "user": UserResponse.from_user(user),
    }


@router.get("/me", response_model=UserResponse)
def read_current_user(claims: Claims = Depends(get_current_user)):
    return UserResponse(id=claims.id, username=claims.username, role=claims.role)
