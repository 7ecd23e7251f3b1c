from sqlalchemy import Column, Integer, ForeignKey, DateTime, Numeric
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.db.session import Base

class PaidExpense(Base):
    __tablename__ = "paid_expenses"

    id = Column(Integer, primary_key=True, index=True)
    payment_history_id = Column(Integer, ForeignKey("payment_history.id", ondelete="CASCADE"), nullable=False, index=True)
    expense_id = Column(Integer, ForeignKey("expenses.id", ondelete="CASCADE"), nullable=False, index=True)
    amount_paid = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    payment = relationship("PaymentHistory", back_populates="paid_expenses")
    expense = relationship("Expense", back_populates="paid_links")
