from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.core.jwt_config import decode_token, get_token_from_request
from app.services.user_service import get_user_by_id, get_user_by_email
from app.core.security import verify_password

async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)):
    token = get_token_from_request(request=request)
    payload = decode_token(token)
    user_id = payload.get("sub")

    if user_id is None:
        raise HTTPException(status_code=403, detail="Invalid or expired token")

    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=403, detail="Invalid or expired token")

    user = await get_user_by_id(db, user_id)

    if user is None:
        raise HTTPException(status_code=401, detail="User not found")

    return user

async def authenticate_user(db:AsyncSession, email:str, password:str):
    user = await get_user_by_email(db, email)
    if not user:
        return None

    if not verify_password(password, user.password_hash):
        return None

    return user
