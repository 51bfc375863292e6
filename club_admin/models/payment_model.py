# /club_admin/models/payment_model.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import CalendarDate, PartialModel


class PaymentBase(BaseModel):
    """A student's fee payment for one course and one calendar month."""
    studentId: int
    courseId: int
    amount: int = Field(..., ge=0, description="Amount paid, in whole currency units.")
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=1900, le=2100)
    paymentDate: CalendarDate


class PaymentCreate(PaymentBase):
    pass


class PaymentUpdate(PartialModel):
    studentId: Optional[int] = None
    courseId: Optional[int] = None
    amount: Optional[int] = Field(default=None, ge=0)
    month: Optional[int] = Field(default=None, ge=1, le=12)
    year: Optional[int] = Field(default=None, ge=1900, le=2100)
    paymentDate: Optional[CalendarDate] = None


class Payment(PaymentBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    createdAt: datetime
