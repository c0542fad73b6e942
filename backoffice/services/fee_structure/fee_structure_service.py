"""
Fee Structure Service

Handles fee structures and their components:
- Creation with components in one transaction
- Component amounts default to the fee type's catalog amount
- Component add / update / remove; repricing a component reprices its
  uncustomized ledger rows
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ErrorCode
from backoffice.models.fee_structure import FeeStructure, FeeStructureComponent
from backoffice.repositories.academic import CourseRepository, UniversityRepository
from backoffice.repositories.fee_structure import (
    FeeStructureComponentRepository,
    FeeStructureRepository,
    FeeTypeRepository,
    StudentFeeCustomizationRepository,
)
from backoffice.repositories.payment import FeePaymentRepository
from backoffice.schemas.common.base import quantize_money
from backoffice.schemas.fee_structure import (
    FeeStructureComponentCreate,
    FeeStructureComponentUpdate,
    FeeStructureCreate,
)
from backoffice.services.base import BaseService, ServiceResult
from backoffice.services.payment.payment_rules import derive_payment_status


class FeeStructureService(BaseService[FeeStructure, FeeStructureRepository]):
    """
    Fee structure management.

    A structure belongs to one university and course; each component
    points at a fee type and carries its own amount, which is what
    assignment copies into the ledger.
    """

    entity_name = "Fee structure"

    def __init__(
        self,
        repository: FeeStructureRepository,
        db_session: Session,
        component_repository: Optional[FeeStructureComponentRepository] = None,
        fee_type_repository: Optional[FeeTypeRepository] = None,
        payment_repository: Optional[FeePaymentRepository] = None,
    ):
        super().__init__(repository, db_session)
        self.component_repository = component_repository or FeeStructureComponentRepository(db_session)
        self.fee_type_repository = fee_type_repository or FeeTypeRepository(db_session)
        self.payment_repository = payment_repository or FeePaymentRepository(db_session)
        self.customization_repository = StudentFeeCustomizationRepository(db_session)
        self.university_repository = UniversityRepository(db_session)
        self.course_repository = CourseRepository(db_session)

    # -------------------------------------------------------------------------
    # Structures
    # -------------------------------------------------------------------------

    def get_structure(self, fee_structure_id: UUID) -> ServiceResult[FeeStructure]:
        try:
            structure = self.repository.find_with_components(fee_structure_id)
            if not structure:
                return ServiceResult.not_found(self.entity_name, str(fee_structure_id))
            return ServiceResult.success(structure)
        except Exception as e:
            return self._handle_exception(e, "get fee structure", fee_structure_id)

    def create_structure(self, request: FeeStructureCreate) -> ServiceResult[FeeStructure]:
        """
        Create a structure together with its components.

        Returns:
            ServiceResult containing the created structure or error details
        """
        try:
            if not self.university_repository.find_by_id(request.university_id):
                return ServiceResult.not_found("University", str(request.university_id))
            if not self.course_repository.find_by_id(request.course_id):
                return ServiceResult.not_found("Course", str(request.course_id))

            structure = FeeStructure(
                name=request.name,
                university_id=request.university_id,
                course_id=request.course_id,
                is_active=request.is_active,
            )
            for component_request in request.components:
                component = self._build_component(component_request)
                if isinstance(component, ServiceResult):
                    return component
                structure.components.append(component)

            with self.transaction():
                self.repository.create(structure, commit=False)

            self._logger.info(
                "Fee structure created successfully",
                extra={
                    "structure_id": str(structure.id),
                    "university_id": str(request.university_id),
                    "course_id": str(request.course_id),
                    "component_count": len(request.components),
                },
            )
            return self.get_structure(structure.id)
        except Exception as e:
            return self._handle_exception(e, "create fee structure")

    def list_structures(
        self,
        university_id: Optional[UUID] = None,
        course_id: Optional[UUID] = None,
        is_active: Optional[bool] = None,
    ) -> ServiceResult[List[FeeStructure]]:
        return self.list(
            limit=None,
            filters={"university_id": university_id, "course_id": course_id, "is_active": is_active},
        )

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    def add_component(
        self,
        fee_structure_id: UUID,
        request: FeeStructureComponentCreate,
    ) -> ServiceResult[FeeStructureComponent]:
        try:
            structure = self.repository.find_by_id(fee_structure_id)
            if not structure:
                return ServiceResult.not_found(self.entity_name, str(fee_structure_id))

            component = self._build_component(request)
            if isinstance(component, ServiceResult):
                return component
            component.fee_structure_id = structure.id

            with self.transaction():
                self.component_repository.create(component, commit=False)

            self._log_operation("add fee structure component", component.id,
                                {"fee_structure_id": str(fee_structure_id)})
            return ServiceResult.success(component, message="Component added successfully")
        except Exception as e:
            return self._handle_exception(e, "add fee structure component", fee_structure_id)

    def update_component(
        self,
        component_id: UUID,
        request: FeeStructureComponentUpdate,
    ) -> ServiceResult[FeeStructureComponent]:
        """
        Change a component's amount or frequency.

        A new amount is carried into the component's existing ledger rows
        in the same transaction, except for students holding a
        customization for it. Status is re-derived on every repriced row.
        """
        try:
            component = self.component_repository.find_by_id(component_id)
            if not component:
                return ServiceResult.not_found("Fee structure component", str(component_id))

            data = request.model_dump(exclude_unset=True, exclude_none=True)
            repriced = []
            if "amount" in data:
                data["amount"] = quantize_money(data["amount"])
                payments = self.payment_repository.find_by_criteria(
                    {"fee_structure_component_id": component_id}, limit=None
                )
                customized = self.customization_repository.map_for(
                    {p.student_id for p in payments}, [component_id]
                )
                repriced = [p for p in payments if (p.student_id, component_id) not in customized]

            with self.transaction():
                self.component_repository.update_entity(component, data, commit=False)
                for payment in repriced:
                    self.payment_repository.update_entity(
                        payment,
                        {
                            "amount_due": data["amount"],
                            "payment_status": derive_payment_status(data["amount"], payment.amount_paid),
                        },
                        commit=False,
                    )

            self._log_operation(
                "update fee structure component",
                component_id,
                {"fields": sorted(data), "ledger_rows": len(repriced)},
            )
            return ServiceResult.success(
                component,
                message="Component updated successfully",
                metadata={"updated_rows": len(repriced)},
            )
        except Exception as e:
            return self._handle_exception(e, "update fee structure component", component_id)

    def remove_component(self, component_id: UUID) -> ServiceResult[bool]:
        try:
            component = self.component_repository.find_by_id(component_id)
            if not component:
                return ServiceResult.not_found("Fee structure component", str(component_id))

            ledger_rows = self.payment_repository.count({"fee_structure_component_id": component_id})
            if ledger_rows:
                return ServiceResult.conflict(
                    "Component has ledger rows and cannot be removed",
                    code=ErrorCode.RESOURCE_IN_USE,
                    details={"component_id": str(component_id), "ledger_rows": ledger_rows},
                )

            with self.transaction():
                self.component_repository.delete(component_id, commit=False)

            self._log_operation("remove fee structure component", component_id)
            return ServiceResult.success(True, message="Component removed successfully")
        except Exception as e:
            return self._handle_exception(e, "remove fee structure component", component_id)

    def _build_component(self, request: FeeStructureComponentCreate):
        fee_type = self.fee_type_repository.find_by_id(request.fee_type_id)
        if not fee_type:
            return ServiceResult.not_found("Fee type", str(request.fee_type_id))

        return FeeStructureComponent(
            fee_type_id=fee_type.id,
            amount=request.amount if request.amount is not None else fee_type.amount,
            frequency=request.frequency or fee_type.frequency,
        )

    def _validate_delete(self, entity_id: UUID) -> Optional[ServiceResult]:
        components = self.component_repository.find_by_structure(entity_id)
        ids = [c.id for c in components]
        if ids and self.payment_repository.exists({"fee_structure_component_id": ids}):
            return ServiceResult.conflict(
                "Fee structure has ledger rows and cannot be deleted; deactivate it instead",
                code=ErrorCode.RESOURCE_IN_USE,
                details={"fee_structure_id": str(entity_id)},
            )
        return None
