"""
Invoice Repository
"""

from sqlalchemy.orm import Session

from backoffice.models.invoice import Invoice
from backoffice.repositories.base.base_repository import BaseRepository


class InvoiceRepository(BaseRepository[Invoice]):

    def __init__(self, db: Session):
        super().__init__(Invoice, db)

    def number_exists(self, invoice_number: str) -> bool:
        return self.exists({"invoice_number": invoice_number})
