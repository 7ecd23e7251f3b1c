from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.schemas.user import UserOut, UsersEnvelope
from app.services.user_service import get_other_users
from app.core.dependencies import get_current_user

router = APIRouter()

@router.get("", response_model=UsersEnvelope, description="list the other roommates")
async def roommates(db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    users = await get_other_users(db, current_user.id)
    return UsersEnvelope(users=[UserOut.model_validate(u) for u in users])
