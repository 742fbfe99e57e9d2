from datetime import date
from typing import Any, Literal

from fastapi import APIRouter, Form
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from models.errors import TransactionNotFound
from services.occurrence_service import get_future_transactions
from services.transaction_service import (
    add_transaction,
    delete_transaction,
    get_all_transactions,
    update_transaction_field,
)
from utils.money import parse_amount

router = APIRouter()


class TransactionCreate(BaseModel):
    name: str
    amount: float
    start_date: date
    end_date: date
    frequency: int = 0
    uom: Literal["day", "week", "month"] = "day"


class TransactionFieldUpdate(BaseModel):
    field: Literal["name", "amount", "start_date", "end_date", "frequency", "uom"]
    value: Any


def _error(status_code, message):
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@router.get("/transactions")
def list_transactions(include_past: bool = False):
    """
    List stored transactions.

    By default only "current and future" ones are returned: those with an
    occurrence on or after today. ``include_past=true`` returns everything.
    """
    transactions = get_all_transactions()
    if not include_past:
        transactions = get_future_transactions(transactions, date.today())
    return {
        "count": len(transactions),
        "transactions": [t.to_dict() for t in transactions],
    }


@router.post("/transactions", status_code=201)
def create_transaction(txn: TransactionCreate):
    try:
        stored = add_transaction(
            name=txn.name,
            amount=txn.amount,
            start_date=txn.start_date,
            end_date=txn.end_date,
            frequency=txn.frequency,
            uom=txn.uom,
        )
    except ValueError as e:
        return _error(400, str(e))
    return {"success": True, "transaction": stored.to_dict()}


# -------------------------
# MANUAL TRANSACTION FORM SUBMISSION
# -------------------------
@router.post("/transactions/manual")
def add_manual_transaction_form(
    name: str = Form(...),
    amount: str = Form(...),
    start_date: str = Form(...),
    end_date: str = Form(None),
    frequency: int = Form(0),
    uom: str = Form("day"),
):
    """
    Handles HTML form submission; a blank end date means a one-day series.
    """
    try:
        add_transaction(
            name=name,
            amount=parse_amount(amount),
            start_date=start_date,
            end_date=end_date or start_date,
            frequency=frequency,
            uom=uom,
        )
    except ValueError as e:
        return _error(400, str(e))

    return RedirectResponse(url="/transactions", status_code=303)


@router.patch("/transactions/{transaction_id}")
def update_transaction(transaction_id: int, update: TransactionFieldUpdate):
    try:
        updated = update_transaction_field(transaction_id, update.field, update.value)
    except TransactionNotFound as e:
        return _error(404, str(e))
    except (ValueError, TypeError) as e:
        return _error(400, str(e))
    return {"success": True, "transaction": updated.to_dict()}


@router.delete("/transactions/{transaction_id}")
def remove_transaction(transaction_id: int):
    try:
        delete_transaction(transaction_id)
    except TransactionNotFound as e:
        return _error(404, str(e))
    return {"success": True}
