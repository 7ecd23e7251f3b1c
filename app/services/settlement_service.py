import logging
from datetime import datetime, timezone
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, or_
from sqlalchemy.orm import selectinload
from fastapi import HTTPException
from app.models.settlement import Settlement
from app.models.payment_history import PaymentHistory, PaymentStatus
from app.models.paid_expense import PaidExpense
from app.models.expense import Expense
from app.schemas.settlements import SettlementCreate
from app.services.user_service import get_user_by_id

logger = logging.getLogger(__name__)

def unpaid_expenses_query(expense_ids: List[int]):
    # rows stay locked until commit so two settlements cannot link the same expense
    return (
        select(Expense)
        .where(
            Expense.id.in_(sorted(set(expense_ids))),
            Expense.is_paid == False
        )
        .order_by(Expense.id)
        .with_for_update()
    )

async def _pay_expenses(
    db: AsyncSession,
    payment: PaymentHistory,
    expense_ids: List[int],
    paid_at: datetime
) -> int:
    # Already paid ids are dropped here, not reported
    res = await db.execute(unpaid_expenses_query(expense_ids))
    expenses = res.scalars().all()

    if not expenses:
        return 0

    for expense in expenses:
        # each link covers the full expense amount, not a share of the settlement
        db.add(PaidExpense(
            payment_history_id=payment.id,
            expense_id=expense.id,
            amount_paid=expense.amount
        ))
    await db.flush()

    await db.execute(
        update(Expense)
        .where(Expense.id.in_([e.id for e in expenses]))
        .values(
            is_paid=True,
            is_settled=True,
            payment_date=paid_at,
            updated_at=paid_at
        )
        .execution_options(synchronize_session="fetch")
    )

    return len(expenses)

async def create_settlement(db: AsyncSession, payer_id: int, data: SettlementCreate):
    if data.payee_id == payer_id:
        raise HTTPException(400, "Cannot record a payment to yourself")

    payee = await get_user_by_id(db, data.payee_id)
    if not payee:
        raise HTTPException(400, "Payee not found")

    now = datetime.now(timezone.utc)

    try:
        # 1. Settlement record
        settlement = Settlement(
            payer_id=payer_id,
            payee_id=data.payee_id,
            amount=data.amount,
            description=data.description,
            image_url=data.image_url
        )
        db.add(settlement)
        await db.flush()  # gives settlement.id

        # 2. Payment history for the audit trail
        payment = PaymentHistory(
            settlement_id=settlement.id,
            payer_id=payer_id,
            payee_id=data.payee_id,
            amount=data.amount,
            payment_method=data.payment_method,
            status=PaymentStatus.completed,
            description=data.description,
            proof_url=data.image_url,
            payment_date=now
        )
        db.add(payment)
        await db.flush()

        # 3. Mark the covered expenses as paid
        paid_count = 0
        if data.expense_ids:
            paid_count = await _pay_expenses(db, payment, data.expense_ids, now)

        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Settlement from user %s to user %s rolled back", payer_id, data.payee_id)
        raise

    await db.refresh(settlement)
    await db.refresh(payment)

    logger.info(
        "User %s paid %s to user %s (settlement %s, %d expenses covered)",
        payer_id, settlement.amount, data.payee_id, settlement.id, paid_count
    )
    return settlement, payment, paid_count

async def list_settlements(db: AsyncSession, user_id: int):
    q = (
        select(Settlement)
        .where(or_(Settlement.payer_id == user_id, Settlement.payee_id == user_id))
        .order_by(Settlement.created_at.desc(), Settlement.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()

async def list_payment_history(db: AsyncSession, user_id: int):
    q = (
        select(PaymentHistory)
        .where(or_(PaymentHistory.payer_id == user_id, PaymentHistory.payee_id == user_id))
        .order_by(PaymentHistory.payment_date.desc(), PaymentHistory.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()

async def get_payment_details(db: AsyncSession, payment_id: int, user_id: int):
    q = (
        select(PaymentHistory)
        .options(selectinload(PaymentHistory.paid_expenses).selectinload(PaidExpense.expense))
        .where(PaymentHistory.id == payment_id)
    )
    res = await db.execute(q)
    payment = res.scalar_one_or_none()

    if not payment:
        raise HTTPException(404, "Payment not found")

    if user_id not in (payment.payer_id, payment.payee_id):
        raise HTTPException(403, "Not authorized to view this payment")

    paid_expenses = sorted(payment.paid_expenses, key=lambda p: p.id)
    return payment, paid_expenses
