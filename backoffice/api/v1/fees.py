"""
Fee catalog, fee structures, assignment and the fee ledger.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.api import deps
from backoffice.api.errors import unwrap
from backoffice.api.v1.crud import create_crud_router
from backoffice.schemas.fee_structure import (
    CustomAmountRequest,
    CustomizationResponse,
    FeeAssignmentRequest,
    FeeAssignmentResult,
    FeeStructureComponentCreate,
    FeeStructureComponentResponse,
    FeeStructureComponentUpdate,
    FeeStructureCreate,
    FeeStructureResponse,
    FeeStructureUpdate,
    FeeTypeCreate,
    FeeTypeResponse,
    FeeTypeUpdate,
    OneTimeChargeEntry,
)
from backoffice.schemas.payment import FeePaymentResponse, PaymentUpdateRequest
from backoffice.services.fee_structure import FeeAssignmentService, FeeStructureService
from backoffice.services.payment import FeeLedgerService

router = APIRouter(prefix="/fees")


# --- Fee structures ------------------------------------------------------------

@router.get("/structures", response_model=List[FeeStructureResponse], tags=["Fee Structures"])
def list_fee_structures(
    university_id: Optional[UUID] = None,
    course_id: Optional[UUID] = None,
    is_active: Optional[bool] = None,
    service: FeeStructureService = Depends(deps.get_fee_structure_service),
):
    return unwrap(service.list_structures(university_id=university_id, course_id=course_id, is_active=is_active))


@router.post(
    "/structures",
    response_model=FeeStructureResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create fee structure",
    description="Create a structure together with its components; omitted amounts come from the fee type",
    tags=["Fee Structures"],
)
def create_fee_structure(
    payload: FeeStructureCreate,
    service: FeeStructureService = Depends(deps.get_fee_structure_service),
):
    return unwrap(service.create_structure(payload))


@router.get("/structures/{fee_structure_id}", response_model=FeeStructureResponse, tags=["Fee Structures"])
def get_fee_structure(
    fee_structure_id: UUID,
    service: FeeStructureService = Depends(deps.get_fee_structure_service),
):
    return unwrap(service.get_structure(fee_structure_id))


@router.patch("/structures/{fee_structure_id}", response_model=FeeStructureResponse, tags=["Fee Structures"])
def update_fee_structure(
    fee_structure_id: UUID,
    payload: FeeStructureUpdate,
    service: FeeStructureService = Depends(deps.get_fee_structure_service),
):
    return unwrap(service.update(fee_structure_id, payload))


@router.delete(
    "/structures/{fee_structure_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Fee Structures"],
)
def delete_fee_structure(
    fee_structure_id: UUID,
    service: FeeStructureService = Depends(deps.get_fee_structure_service),
) -> Response:
    unwrap(service.delete(fee_structure_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/structures/{fee_structure_id}/components",
    response_model=List[FeeStructureComponentResponse],
    tags=["Fee Structures"],
)
def list_components(
    fee_structure_id: UUID,
    service: FeeStructureService = Depends(deps.get_fee_structure_service),
):
    return unwrap(service.get_structure(fee_structure_id)).components


@router.post(
    "/structures/{fee_structure_id}/components",
    response_model=FeeStructureComponentResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Fee Structures"],
)
def add_component(
    fee_structure_id: UUID,
    payload: FeeStructureComponentCreate,
    service: FeeStructureService = Depends(deps.get_fee_structure_service),
):
    return unwrap(service.add_component(fee_structure_id, payload))


@router.patch(
    "/components/{component_id}",
    response_model=FeeStructureComponentResponse,
    summary="Update component",
    description="Existing ledger rows keep their amount_due",
    tags=["Fee Structures"],
)
def update_component(
    component_id: UUID,
    payload: FeeStructureComponentUpdate,
    service: FeeStructureService = Depends(deps.get_fee_structure_service),
):
    return unwrap(service.update_component(component_id, payload))


@router.delete("/components/{component_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Fee Structures"])
def remove_component(
    component_id: UUID,
    service: FeeStructureService = Depends(deps.get_fee_structure_service),
) -> Response:
    unwrap(service.remove_component(component_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Assignment & ledger -------------------------------------------------------

@router.post(
    "/assignments",
    response_model=FeeAssignmentResult,
    status_code=status.HTTP_201_CREATED,
    summary="Assign fee structure",
    description="Create one ledger row per selected student and structure component",
    tags=["Fee Ledger"],
)
def assign_fee_structure(
    payload: FeeAssignmentRequest,
    service: FeeAssignmentService = Depends(deps.get_fee_assignment_service),
):
    return unwrap(service.assign(payload))


@router.patch(
    "/payments/{payment_id}",
    response_model=FeePaymentResponse,
    summary="Record payment",
    description="Set the cumulative amount paid; status is derived",
    tags=["Fee Ledger"],
)
def update_payment(
    payment_id: UUID,
    payload: PaymentUpdateRequest,
    service: FeeLedgerService = Depends(deps.get_fee_ledger_service),
):
    return unwrap(service.update_payment(payment_id, payload.amount_paid, expected_version=payload.expected_version))


@router.put(
    "/customizations",
    response_model=CustomizationResponse,
    summary="Set custom amount",
    description="Override one component's amount for one student and update the matching ledger rows",
    tags=["Fee Ledger"],
)
def apply_custom_amount(
    payload: CustomAmountRequest,
    service: FeeLedgerService = Depends(deps.get_fee_ledger_service),
):
    return unwrap(
        service.apply_custom_amount(
            payload.student_id,
            payload.fee_structure_component_id,
            payload.custom_amount,
            reason=payload.reason,
            created_by=payload.created_by,
        )
    )


@router.get("/one-time-charges", response_model=List[OneTimeChargeEntry], tags=["Fee Ledger"])
def list_one_time_charges(
    student_id: Optional[UUID] = Query(None),
    service: FeeLedgerService = Depends(deps.get_fee_ledger_service),
):
    return unwrap(service.list_one_time_charges(student_id=student_id))


router.include_router(
    create_crud_router(
        entity_name="Fee type",
        get_service=deps.get_fee_type_service,
        create_schema=FeeTypeCreate,
        update_schema=FeeTypeUpdate,
        response_schema=FeeTypeResponse,
        filter_fields=("is_active", "frequency", "category"),
    ),
    prefix="/types",
    tags=["Fee Types"],
)
