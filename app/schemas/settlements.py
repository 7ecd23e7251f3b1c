from datetime import datetime
from decimal import Decimal
from typing import List
from pydantic import Field
from app.models.payment_history import PaymentMethod, PaymentStatus
from app.schemas.common import CamelModel
from app.schemas.expense import ExpenseOut

class SettlementCreate(CamelModel):
    payee_id: int
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    description: str | None = None
    image_url: str | None = None
    payment_method: PaymentMethod = PaymentMethod.bank_transfer
    expense_ids: List[int] | None = None

class SettlementOut(CamelModel):
    id: int
    payer_id: int
    payee_id: int
    amount: Decimal
    description: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None

class PaymentHistoryOut(CamelModel):
    id: int
    settlement_id: int
    payer_id: int
    payee_id: int
    amount: Decimal
    payment_method: PaymentMethod
    status: PaymentStatus
    description: str | None = None
    proof_url: str | None = None
    payment_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

class PaidExpenseOut(CamelModel):
    id: int
    amount_paid: Decimal
    created_at: datetime | None = None
    expense: ExpenseOut

class SettlementCreated(CamelModel):
    message: str
    settlement: SettlementOut
    payment_history: PaymentHistoryOut
    paid_expense_count: int

class SettlementList(CamelModel):
    settlements: list[SettlementOut]

class PaymentHistoryList(CamelModel):
    payment_history: list[PaymentHistoryOut]

class PaymentDetails(CamelModel):
    payment: PaymentHistoryOut
    paid_expenses: list[PaidExpenseOut]
