"""
Invoice Service

Builds invoices from entered line items, persists them as immutable
snapshots and toggles their paid status.
"""

from datetime import date as Date, timedelta
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from backoffice.config.settings import settings
from backoffice.core.exceptions import ValidationError
from backoffice.models.base import InvoiceStatus
from backoffice.models.invoice import Invoice
from backoffice.repositories.common import NumberSequenceRepository
from backoffice.repositories.fee_structure import FeeTypeRepository
from backoffice.repositories.invoice import InvoiceRepository
from backoffice.repositories.student import StudentRepository
from backoffice.schemas.invoice import InvoiceRequest, InvoiceTotals
from backoffice.services.base import BaseService, ServiceResult
from backoffice.services.invoice.invoice_calculator import PricedItem, calculate_totals
from backoffice.services.numbering import NumberingService


class InvoiceService(BaseService[Invoice, InvoiceRepository]):
    """
    Invoice generation.

    Totals are computed once, at creation; later changes to fee type
    amounts never alter a stored invoice.
    """

    entity_name = "Invoice"

    def __init__(self, repository: InvoiceRepository, db_session: Session, numbering: Optional[NumberingService] = None):
        super().__init__(repository, db_session)
        self.fee_type_repository = FeeTypeRepository(db_session)
        self.student_repository = StudentRepository(db_session)
        self.numbering = numbering or NumberingService(NumberSequenceRepository(db_session), db_session)

    def _gst_percentage(self, request: InvoiceRequest) -> Decimal:
        if request.gst_percentage is not None:
            return request.gst_percentage
        return Decimal(str(settings.DEFAULT_GST_PERCENTAGE))

    def _priced_items(self, request: InvoiceRequest) -> List[PricedItem]:
        """Resolve descriptions and unit amounts, falling back to the fee type."""
        priced = []
        for index, item in enumerate(request.items):
            description, amount = item.description, item.amount
            if item.fee_type_id is not None:
                fee_type = self.fee_type_repository.find_by_id(item.fee_type_id)
                if fee_type is None:
                    raise ValidationError(
                        f"Fee type {item.fee_type_id} not found",
                        field_errors={f"items.{index}.fee_type_id": ["not found"]},
                    )
                description = description or fee_type.name
                if amount is None:
                    amount = fee_type.amount

            if not description:
                raise ValidationError("Item description is required", field_errors={f"items.{index}.description": ["required"]})
            if amount is None:
                raise ValidationError("Item amount is required", field_errors={f"items.{index}.amount": ["required"]})
            priced.append((description, Decimal(amount), item.quantity))
        return priced

    def _totals(self, request: InvoiceRequest) -> InvoiceTotals:
        return calculate_totals(
            self._priced_items(request),
            discount=request.discount,
            discount_type=request.discount_type,
            apply_gst=request.apply_gst,
            gst_percentage=self._gst_percentage(request),
        )

    def preview(self, request: InvoiceRequest) -> ServiceResult[InvoiceTotals]:
        """Compute totals without persisting anything."""
        try:
            return ServiceResult.success(self._totals(request))
        except Exception as e:
            return self._handle_exception(e, "preview invoice")

    def create_invoice(self, request: InvoiceRequest) -> ServiceResult[Invoice]:
        try:
            if request.student_id is not None and not self.student_repository.exists({"id": request.student_id}):
                return ServiceResult.validation_failure(
                    f"Student {request.student_id} not found", field="student_id"
                )

            totals = self._totals(request)
            invoice_date = request.invoice_date or Date.today()
            due_date = request.due_date or invoice_date + timedelta(days=settings.FEE_DEFAULT_DUE_DAYS)
            if due_date < invoice_date:
                return ServiceResult.validation_failure("Due date cannot precede invoice date", field="due_date")

            with self.transaction():
                invoice = Invoice(
                    invoice_number=self.numbering.allocate_invoice_number(),
                    student_id=request.student_id,
                    status=request.status,
                    invoice_date=invoice_date,
                    due_date=due_date,
                    items=[line.model_dump(mode="json") for line in totals.items],
                    discount_type=request.discount_type,
                    discount=request.discount,
                    gst_percentage=self._gst_percentage(request) if request.apply_gst else Decimal("0.00"),
                    subtotal=totals.subtotal,
                    discount_amount=totals.discount_amount,
                    gst_amount=totals.gst_amount,
                    total_amount=totals.total_amount,
                    terms=request.terms,
                    created_by=request.created_by,
                )
                self.repository.create(invoice, commit=False)

            self.repository.refresh(invoice)
            self._log_operation(
                "create Invoice",
                invoice.id,
                {"invoice_number": invoice.invoice_number, "total_amount": str(invoice.total_amount)},
            )
            return ServiceResult.success(invoice, message="Invoice created successfully")
        except Exception as e:
            return self._handle_exception(e, "create invoice")

    def list_invoices(self, student_id: Optional[UUID] = None, status: Optional[InvoiceStatus] = None) -> ServiceResult[List[Invoice]]:
        try:
            criteria = {"student_id": student_id, "status": status}
            invoices = self.repository.find_by_criteria(
                {k: v for k, v in criteria.items() if v is not None},
                limit=None,
                order_by=["-invoice_date", "-created_at"],
            )
            return ServiceResult.success(invoices, metadata={"count": len(invoices)})
        except Exception as e:
            return self._handle_exception(e, "list invoices")

    def set_status(self, invoice_id: UUID, status: InvoiceStatus) -> ServiceResult[Invoice]:
        """Mark an invoice Paid or Unpaid; nothing else on it changes."""
        try:
            invoice = self.repository.find_by_id(invoice_id)
            if invoice is None:
                return ServiceResult.not_found(self.entity_name, str(invoice_id))

            with self.transaction():
                invoice.status = status
            self.repository.refresh(invoice)
            self._log_operation("set Invoice status", invoice_id, {"status": status.value})
            return ServiceResult.success(invoice)
        except Exception as e:
            return self._handle_exception(e, "set invoice status", invoice_id)
