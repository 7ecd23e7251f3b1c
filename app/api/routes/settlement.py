from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.core.dependencies import get_current_user
from app.services.settlement_service import create_settlement, list_settlements, list_payment_history, get_payment_details
from app.schemas.settlements import (
    SettlementCreate,
    SettlementOut,
    SettlementCreated,
    SettlementList,
    PaymentHistoryOut,
    PaymentHistoryList,
    PaidExpenseOut,
    PaymentDetails
)

router = APIRouter()

@router.get("", response_model=SettlementList)
async def get_settlements(db: AsyncSession = Depends(get_db), user = Depends(get_current_user)):
    settlements = await list_settlements(db, user.id)
    return SettlementList(settlements=[SettlementOut.model_validate(s) for s in settlements])

@router.post("", response_model=SettlementCreated, status_code=201)
async def add_settlement(
    data: SettlementCreate,
    db: AsyncSession = Depends(get_db),
    user = Depends(get_current_user)
):
    settlement, payment, paid_count = await create_settlement(db, user.id, data)
    return SettlementCreated(
        message="Settlement created successfully",
        settlement=SettlementOut.model_validate(settlement),
        payment_history=PaymentHistoryOut.model_validate(payment),
        paid_expense_count=paid_count
    )

@router.get("/payment-history", response_model=PaymentHistoryList)
async def payment_history(db: AsyncSession = Depends(get_db), user = Depends(get_current_user)):
    payments = await list_payment_history(db, user.id)
    return PaymentHistoryList(payment_history=[PaymentHistoryOut.model_validate(p) for p in payments])

@router.get("/payment-history/{payment_id}", response_model=PaymentDetails)
async def payment_details(payment_id: int, db: AsyncSession = Depends(get_db), user = Depends(get_current_user)):
    payment, paid_expenses = await get_payment_details(db, payment_id, user.id)
    return PaymentDetails(
        payment=PaymentHistoryOut.model_validate(payment),
        paid_expenses=[PaidExpenseOut.model_validate(p) for p in paid_expenses]
    )
