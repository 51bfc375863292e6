# /club_admin/routers/payments_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..models import payment_model
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[payment_model.Payment], summary="Get Payments by Any Combination of Filters")
def get_payments(
    studentId: Optional[int] = None,
    courseId: Optional[int] = None,
    month: Optional[int] = None,
    year: Optional[int] = None,
    db: DatabaseService = Depends(get_db_service),
):
    return db.get_payments(student_id=studentId, course_id=courseId, month=month, year=year)


@router.post("", response_model=payment_model.Payment, status_code=status.HTTP_201_CREATED, summary="Record a Payment")
def create_payment(payment: payment_model.PaymentCreate, db: DatabaseService = Depends(get_db_service)):
    return db.add_payment(payment.model_dump())


@router.get("/{payment_id}", response_model=payment_model.Payment, summary="Get a Payment")
def get_payment(payment_id: int, db: DatabaseService = Depends(get_db_service)):
    payment = db.get_payment(payment_id)
    if payment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return payment


@router.put("/{payment_id}", response_model=payment_model.Payment, summary="Update a Payment")
def update_payment(payment_id: int, payment_update: payment_model.PaymentUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated = db.update_payment(payment_id, payment_update.changes())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return updated


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Payment")
def delete_payment(payment_id: int, db: DatabaseService = Depends(get_db_service)):
    if not db.delete_payment(payment_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
