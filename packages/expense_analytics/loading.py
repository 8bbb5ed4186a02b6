"""Load exported expense records from JSON.

The export is a JSON array of expense objects, as written by the storage
collaborator (camelCase keys such as ``paymentMethod`` are accepted). Records
are validated into :class:`~expense_analytics.models.Expense`; anything
malformed is rejected here so the aggregation engine only ever sees valid
records.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .logging_setup import get_logger
from .models import Expense

_logger = get_logger("expense_analytics.loading")

_EXPENSES_ADAPTER: TypeAdapter[list[Expense]] = TypeAdapter(list[Expense])


def parse_expenses(text: str | bytes) -> list[Expense]:
    """Validate a JSON array of expense objects.

    Raises ``ValueError`` (a :class:`pydantic.ValidationError`) when the JSON
    is malformed or any record breaks the expense schema.
    """

    records = _EXPENSES_ADAPTER.validate_json(text)
    _logger.debug("parsed %d expense records", len(records))
    return records


def load_expenses(path: str | os.PathLike[str]) -> list[Expense]:
    """Read and validate the expense export at ``path``.

    ``FileNotFoundError`` and ``PermissionError`` propagate unchanged; invalid
    content raises ``ValueError`` naming the file.
    """

    p = Path(path)
    raw = p.read_bytes()
    try:
        return parse_expenses(raw)
    except ValidationError as e:
        raise ValueError(
            f"invalid expense export {os.fspath(p)!r}: {e.error_count()} error(s)\n{e}"
        ) from e


__all__ = ["load_expenses", "parse_expenses"]
