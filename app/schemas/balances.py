from decimal import Decimal
from app.schemas.common import CamelModel

class BalanceOut(CamelModel):
    total_paid: Decimal
    total_shared: Decimal
    personal_expenses: Decimal
    net_balance: Decimal
