from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, Numeric, Boolean
from sqlalchemy.sql import func, expression
from sqlalchemy.orm import relationship
from app.db.session import Base

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=True)
    payer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    is_shared = Column(Boolean, nullable=False, default=True, server_default=expression.true())
    is_settled = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    # is_paid implies payment_date is set
    is_paid = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    payment_date = Column(DateTime(timezone=True), nullable=True)
    image_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    paid_links = relationship("PaidExpense", back_populates="expense", cascade="all, delete")
