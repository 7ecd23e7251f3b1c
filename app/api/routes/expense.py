from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.schemas.expense import ExpenseCreate, ExpenseSettle, ExpenseOut, ExpenseEnvelope, ExpenseList
from app.services.expense_services import (
    create_expense,
    list_expenses,
    list_unpaid_expenses,
    update_expense,
    delete_expense,
    set_expense_settled
)
from app.core.dependencies import get_current_user

router = APIRouter()

@router.get("", response_model=ExpenseList)
async def all_expenses(db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    expenses = await list_expenses(db, user_id=current_user.id)
    return ExpenseList(expenses=[ExpenseOut.model_validate(e) for e in expenses])

@router.get("/unpaid", response_model=ExpenseList, description="shared expenses not yet covered by a payment")
async def unpaid_expenses(db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    expenses = await list_unpaid_expenses(db)
    return ExpenseList(expenses=[ExpenseOut.model_validate(e) for e in expenses])

@router.post("", response_model=ExpenseEnvelope, status_code=201)
async def add_expense(data: ExpenseCreate, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    expense = await create_expense(db, data, current_user.id)
    return ExpenseEnvelope(message="Expense created successfully", expense=ExpenseOut.model_validate(expense))

@router.put("/{expense_id}", response_model=ExpenseEnvelope)
async def edit(expense_id: int, data: ExpenseCreate, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    expense = await update_expense(db, data, expense_id=expense_id, user_id=current_user.id)
    return ExpenseEnvelope(message="Expense updated successfully", expense=ExpenseOut.model_validate(expense))

@router.delete("/{expense_id}")
async def del_expense(expense_id: int, db:AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    await delete_expense(db, expense_id=expense_id, user_id=current_user.id)
    return {"message": "Expense deleted successfully"}

@router.patch("/{expense_id}/settle", response_model=ExpenseEnvelope)
async def settle(
    expense_id: int,
    data: ExpenseSettle,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    expense = await set_expense_settled(db, expense_id, current_user.id, data.is_settled)
    return ExpenseEnvelope(message="Expense settlement status updated", expense=ExpenseOut.model_validate(expense))
