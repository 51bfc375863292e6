# /club_admin/services/database_helpers/payment_repository.py

from typing import Dict, List, Optional

from club_admin.models.payment_model import Payment
from .base_repository import EntityStore
from .filters import PaymentFilter


class PaymentRepository:
    def __init__(self):
        self.payments: EntityStore[Payment] = EntityStore(Payment)

    def get_payments(self, criteria: Optional[PaymentFilter] = None) -> List[Payment]:
        return self.payments.list(criteria or PaymentFilter())

    def get_payment_by_id(self, payment_id: int) -> Optional[Payment]:
        return self.payments.get(payment_id)

    def add_payment(self, record: Dict) -> Payment:
        return self.payments.add(record)

    def update_payment(self, payment_id: int, data: Dict) -> Optional[Payment]:
        return self.payments.update(payment_id, data)

    def delete_payment(self, payment_id: int) -> bool:
        return self.payments.delete(payment_id)
