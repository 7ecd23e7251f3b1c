from decimal import Decimal
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from fastapi import HTTPException
from app.models.expense import Expense
from app.core.utils import qround, to_decimal
from app.services.user_service import get_user_by_id

async def _sum_expenses(db: AsyncSession, *conditions) -> Decimal:
    q = select(func.coalesce(func.sum(Expense.amount), 0)).where(*conditions)
    res = await db.execute(q)
    return qround(to_decimal(res.scalar()))

async def get_balance(db: AsyncSession, user_id: int, other_user_id: int):
    other = await get_user_by_id(db, other_user_id)
    if not other:
        raise HTTPException(404, "User not found")

    if other_user_id == user_id:
        raise HTTPException(400, "Cannot compute a balance with yourself")

    my_shared = await _sum_expenses(
        db,
        Expense.payer_id == user_id,
        Expense.is_shared == True,
        Expense.is_paid == False
    )
    other_shared = await _sum_expenses(
        db,
        Expense.payer_id == other_user_id,
        Expense.is_shared == True,
        Expense.is_paid == False
    )
    personal = await _sum_expenses(
        db,
        Expense.payer_id == user_id,
        Expense.is_shared == False
    )

    # each roommate owes half of what the other fronted
    net = qround((my_shared - other_shared) / Decimal("2"))

    return {
        "total_paid": my_shared,
        "total_shared": qround(my_shared + other_shared),
        "personal_expenses": personal,
        "net_balance": net
    }
