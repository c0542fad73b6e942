"""Admission and receipt number generation."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from backoffice.api import deps
from backoffice.api.errors import unwrap
from backoffice.schemas.numbering import GeneratedNumber, ReceiptNumberRequest
from backoffice.services.numbering import NumberingService

router = APIRouter(prefix="/numbering", tags=["Numbering"])


@router.post("/admission", response_model=GeneratedNumber, summary="Generate admission number")
def generate_admission_number(
    year: Optional[int] = Query(None, ge=1900, le=9999),
    service: NumberingService = Depends(deps.get_numbering_service),
):
    return GeneratedNumber(number=unwrap(service.generate_admission_number(year)))


@router.post("/receipt", response_model=GeneratedNumber, summary="Generate receipt number")
def generate_receipt_number(
    payload: Optional[ReceiptNumberRequest] = None,
    service: NumberingService = Depends(deps.get_numbering_service),
):
    issue_date = payload.issue_date if payload else None
    return GeneratedNumber(number=unwrap(service.generate_receipt_number(issue_date)))
