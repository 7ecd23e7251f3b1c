from datetime import datetime
from decimal import Decimal
from pydantic import Field
from app.schemas.common import CamelModel

class ExpenseCreate(CamelModel):
    title: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    description: str | None = None
    is_shared: bool = True
    image_url: str | None = None

class ExpenseSettle(CamelModel):
    is_settled: bool

class ExpenseOut(CamelModel):
    id: int
    title: str
    amount: Decimal
    description: str | None = None
    payer_id: int
    is_shared: bool
    is_settled: bool
    is_paid: bool
    payment_date: datetime | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

class ExpenseEnvelope(CamelModel):
    message: str
    expense: ExpenseOut

class ExpenseList(CamelModel):
    expenses: list[ExpenseOut]
