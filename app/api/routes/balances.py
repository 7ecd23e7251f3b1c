from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.core.dependencies import get_current_user
from app.schemas.balances import BalanceOut
from app.services.balance_services import get_balance

router = APIRouter()

@router.get("/{other_user_id}", response_model=BalanceOut)
async def balance_with(
    other_user_id: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return BalanceOut(**await get_balance(db, current_user.id, other_user_id))
