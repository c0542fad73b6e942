"""
CSV rendering for report rows.

The header is the key set of the first row. Numbers are written bare,
everything else quoted; rows are newline terminated.
"""

import csv
import io
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

from backoffice.core.exceptions import ValidationError

NO_DATA_MESSAGE = "No data available to export"


def _csv_value(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float, Decimal)):
        return value
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    return str(value)


def render_csv(rows: Sequence[Dict[str, Any]]) -> str:
    """
    Render report rows as CSV text.

    Raises:
        ValidationError: If there are no rows
    """
    if not rows:
        raise ValidationError(NO_DATA_MESSAGE)

    fieldnames: List[str] = list(rows[0].keys())
    buffer = io.StringIO()
    writer = csv.DictWriter(
        buffer,
        fieldnames=fieldnames,
        quoting=csv.QUOTE_NONNUMERIC,
        lineterminator="\n",
        extrasaction="ignore",
    )
    writer.writeheader()
    for row in rows:
        writer.writerow({key: _csv_value(row.get(key)) for key in fieldnames})
    return buffer.getvalue()


def export_filename(report_name: str, on: Optional[date] = None) -> str:
    """<report-name>-<ISO date>.csv"""
    return f"{report_name}-{(on or date.today()).isoformat()}.csv"
