from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.schemas.user import UserCreate, UserLogin, UserOut, UserEnvelope, AuthResponse
from app.models.user import User
from app.services.user_service import create_user
from app.core.dependencies import authenticate_user, get_current_user
from app.core.jwt_config import create_access_token

router = APIRouter()

@router.post("/register", response_model=AuthResponse, status_code=201)
async def register_user(data:UserCreate, db:AsyncSession = Depends(get_db)):
    try:
        user = await create_user(db, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    token = create_access_token({"sub": str(user.id), "email": user.email})
    return AuthResponse(
        message="User created successfully",
        user=UserOut.model_validate(user),
        token=token
    )

@router.post("/login", response_model=AuthResponse)
async def login_user(data:UserLogin, db:AsyncSession = Depends(get_db)):
    user = await authenticate_user(db, data.email, data.password)

    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": str(user.id), "email": user.email})
    return AuthResponse(
        message="Login successful",
        user=UserOut.model_validate(user),
        token=token
    )

@router.get("/me", response_model=UserEnvelope)
async def read_users_me(current_user: User = Depends(get_current_user)):
    return UserEnvelope(user=UserOut.model_validate(current_user))

@router.post("/logout")
async def logout_user():
    # tokens are stateless, the client discards its copy
    return {"message": "Logout successful"}
