"""Invoice preview, creation and status."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from backoffice.api import deps
from backoffice.api.errors import unwrap
from backoffice.models.base import InvoiceStatus
from backoffice.schemas.invoice import InvoiceRequest, InvoiceResponse, InvoiceStatusUpdate, InvoiceTotals
from backoffice.services.invoice import InvoiceService

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.post("/preview", response_model=InvoiceTotals, summary="Compute invoice totals without saving")
def preview_invoice(payload: InvoiceRequest, service: InvoiceService = Depends(deps.get_invoice_service)):
    return unwrap(service.preview(payload))


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED, summary="Create invoice")
def create_invoice(payload: InvoiceRequest, service: InvoiceService = Depends(deps.get_invoice_service)):
    return unwrap(service.create_invoice(payload))


@router.get("", response_model=List[InvoiceResponse], summary="List invoices")
def list_invoices(
    student_id: Optional[UUID] = None,
    invoice_status: Optional[InvoiceStatus] = None,
    service: InvoiceService = Depends(deps.get_invoice_service),
):
    return unwrap(service.list_invoices(student_id=student_id, status=invoice_status))


@router.get("/{invoice_id}", response_model=InvoiceResponse, summary="Get invoice")
def get_invoice(invoice_id: UUID, service: InvoiceService = Depends(deps.get_invoice_service)):
    return unwrap(service.get_by_id(invoice_id))


@router.patch("/{invoice_id}/status", response_model=InvoiceResponse, summary="Mark invoice paid or unpaid")
def set_invoice_status(
    invoice_id: UUID,
    payload: InvoiceStatusUpdate,
    service: InvoiceService = Depends(deps.get_invoice_service),
):
    return unwrap(service.set_status(invoice_id, payload.status))
