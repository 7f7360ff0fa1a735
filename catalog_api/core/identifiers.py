"""Identifier Helpers — sequential and opaque id schemes, blank-string checks.

Invariants:
    - next_sequential_id returns max(numeric ids) + 1, or "1" when none are numeric
    - Non-numeric ids never break sequencing (they are skipped)
    - new_opaque_id is never empty
"""

import uuid
from typing import Iterable


def is_blank(value: str | None) -> bool:
    """True for None, "" and all-whitespace strings."""
    return value is None or not value.strip()


def next_sequential_id(existing_ids: Iterable[str]) -> str:
    numeric = [int(i) for i in existing_ids if i.strip().isdecimal()]
    return str(max(numeric, default=0) + 1)


def new_opaque_id() -> str:
    return str(uuid.uuid4())
