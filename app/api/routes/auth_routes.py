"""
Authentication Routes

POST /api/register - Register new user
POST /api/login - Login and get JWT token
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_user_service
from app.services.mongo_service import UserService
from app.schemas.schemas import RegisterRequest, LoginRequest, LoginResponse, MessageResponse

router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=MessageResponse, status_code=201)
async def register(request: RegisterRequest, users: UserService = Depends(get_user_service)):
    """
    Register a new user account (admin or student).

    The email is stored lower-cased and must not be registered yet.
    """
    users.register(request)
    return MessageResponse(message="User registered successfully.")


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, users: UserService = Depends(get_user_service)):
    """
    Login and receive a JWT valid for one hour.

    Unknown email and wrong password give the same 400 answer.
    """
    return users.login(request.email, request.password)
