"""
Numbering Service

Generates admission, receipt and invoice numbers:

- admission: ADM<year><4-digit sequence>
- receipt:   RCP<yyyymmdd><4-digit sequence>
- invoice:   INV-<last 6 digits of epoch millis>, advanced past numbers in use
"""

import re
import time
from datetime import date as Date
from typing import Callable, Optional

from sqlalchemy.orm import Session

from backoffice.config.settings import settings
from backoffice.models.common import NumberSequence
from backoffice.repositories.common import NumberSequenceRepository
from backoffice.repositories.invoice import InvoiceRepository
from backoffice.repositories.student import StudentRepository
from backoffice.services.base import BaseService, ServiceResult

INVOICE_DIGITS = 6


class NumberingService(BaseService[NumberSequence, NumberSequenceRepository]):
    """
    Document number generation.

    ``allocate_*`` methods flush inside the caller's transaction;
    ``generate_*`` methods commit and return a ServiceResult.
    """

    entity_name = "Number sequence"

    def __init__(
        self,
        repository: NumberSequenceRepository,
        db_session: Session,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(repository, db_session)
        self.student_repository = StudentRepository(db_session)
        self.invoice_repository = InvoiceRepository(db_session)
        self._clock = clock

    # -------------------------------------------------------------------------
    # Allocation (no commit)
    # -------------------------------------------------------------------------

    def allocate_admission_number(self, year: Optional[int] = None) -> str:
        year = year or Date.today().year
        prefix = f"{settings.ADMISSION_NUMBER_PREFIX}{year}"

        # Numbers entered by hand must never be reissued
        highest = 0
        pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
        for number in self.student_repository.admission_numbers_with_prefix(prefix):
            match = pattern.match(number or "")
            if match:
                highest = max(highest, int(match.group(1)))

        sequence = self.repository.next_value(settings.ADMISSION_NUMBER_PREFIX, str(year), floor=highest)
        return f"{prefix}{sequence:04d}"

    def allocate_receipt_number(self, issue_date: Optional[Date] = None) -> str:
        day = (issue_date or Date.today()).strftime("%Y%m%d")
        sequence = self.repository.next_value(settings.RECEIPT_NUMBER_PREFIX, day)
        return f"{settings.RECEIPT_NUMBER_PREFIX}{day}{sequence:04d}"

    def allocate_invoice_number(self) -> str:
        """
        INV-<last 6 digits of the current epoch milliseconds>.

        On collision the numeric part is incremented (wrapping at one
        million) until an unused number is found.
        """
        modulus = 10 ** INVOICE_DIGITS
        value = int(self._clock() * 1000) % modulus

        for _ in range(modulus):
            candidate = f"{settings.INVOICE_NUMBER_PREFIX}{value:0{INVOICE_DIGITS}d}"
            if not self.invoice_repository.number_exists(candidate):
                return candidate
            value = (value + 1) % modulus

        raise RuntimeError("Invoice number space exhausted")

    # -------------------------------------------------------------------------
    # Generation (commits)
    # -------------------------------------------------------------------------

    def generate_admission_number(self, year: Optional[int] = None) -> ServiceResult[str]:
        try:
            with self.transaction():
                number = self.allocate_admission_number(year)
            self._log_operation("generate admission number", number)
            return ServiceResult.success(number)
        except Exception as e:
            return self._handle_exception(e, "generate admission number")

    def generate_receipt_number(self, issue_date: Optional[Date] = None) -> ServiceResult[str]:
        try:
            with self.transaction():
                number = self.allocate_receipt_number(issue_date)
            self._log_operation("generate receipt number", number)
            return ServiceResult.success(number)
        except Exception as e:
            return self._handle_exception(e, "generate receipt number")
