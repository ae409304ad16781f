"""
Transaction Routes

POST /transactions - Record a payment attempt (status "pending")
POST /payment-status - Set the status for an orderId (creates the record if unknown)
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_transaction_service
from app.services.mongo_service import TransactionService
from app.schemas.schemas import TransactionCreate, PaymentStatusUpdate, TransactionResponse

router = APIRouter(tags=["Transactions"])


@router.post("/transactions", response_model=TransactionResponse, status_code=201)
async def create_transaction(
    request: TransactionCreate,
    transactions: TransactionService = Depends(get_transaction_service)
):
    return transactions.record(request)


@router.post("/payment-status", response_model=TransactionResponse)
async def update_payment_status(
    update: PaymentStatusUpdate,
    transactions: TransactionService = Depends(get_transaction_service)
):
    """Upsert on orderId; any non-empty status string is accepted."""
    return transactions.update_status(update.order_id, update.status)
