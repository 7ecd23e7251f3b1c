import logging
from datetime import datetime, timezone
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from fastapi import HTTPException
from app.models.expense import Expense
from app.schemas.expense import ExpenseCreate

logger = logging.getLogger(__name__)

async def create_expense(db: AsyncSession, data: ExpenseCreate, payer_id: int):
    expense = Expense(
        title=data.title,
        amount=data.amount,
        description=data.description,
        is_shared=data.is_shared,
        image_url=data.image_url,
        payer_id=payer_id
    )
    db.add(expense)
    await db.commit()
    await db.refresh(expense)

    logger.info("User %s created expense %s (%s)", payer_id, expense.id, expense.amount)
    return expense

async def list_expenses(db: AsyncSession, user_id: int):
    # shared expenses are visible to both roommates, personal ones only to their payer
    q = (
        select(Expense)
        .where(or_(Expense.is_shared == True, Expense.payer_id == user_id))
        .order_by(Expense.created_at.desc(), Expense.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()

async def list_unpaid_expenses(db: AsyncSession):
    q = (
        select(Expense)
        .where(Expense.is_shared == True, Expense.is_paid == False)
        .order_by(Expense.created_at.desc(), Expense.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()

async def get_expense_for_payer(db: AsyncSession, expense_id: int, user_id: int, action: str):
    q = select(Expense).where(Expense.id == expense_id)
    res = await db.execute(q)
    expense = res.scalar_one_or_none()

    if not expense:
        raise HTTPException(404, "Expense not found")

    # Authorization: only payer can mutate
    if expense.payer_id != user_id:
        raise HTTPException(403, f"Not authorized to {action} this expense")

    return expense

async def update_expense(db: AsyncSession, data: ExpenseCreate, expense_id: int, user_id: int):
    expense = await get_expense_for_payer(db, expense_id, user_id, "update")

    expense.title = data.title
    expense.amount = data.amount
    expense.description = data.description
    expense.is_shared = data.is_shared
    expense.image_url = data.image_url
    expense.updated_at = datetime.now(timezone.utc)

    await db.commit()
    await db.refresh(expense)
    return expense

async def delete_expense(db: AsyncSession, expense_id: int, user_id: int):
    expense = await get_expense_for_payer(db, expense_id, user_id, "delete")

    # Cascade deletes PaidExpense links through the relationship
    await db.delete(expense)
    await db.commit()

    logger.info("User %s deleted expense %s", user_id, expense_id)

async def set_expense_settled(db: AsyncSession, expense_id: int, user_id: int, is_settled: bool):
    q = select(Expense).where(Expense.id == expense_id)
    res = await db.execute(q)
    expense = res.scalar_one_or_none()

    if not expense:
        raise HTTPException(404, "Expense not found")

    if not expense.is_shared:
        raise HTTPException(403, "Only shared expenses can be settled")

    if expense.payer_id != user_id:
        raise HTTPException(403, "Only the payer can change the settlement status")

    expense.is_settled = is_settled
    expense.updated_at = datetime.now(timezone.utc)

    await db.commit()
    await db.refresh(expense)
    return expense
