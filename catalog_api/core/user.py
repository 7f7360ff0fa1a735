"""User Entity — account holder with a derived display name.

Invariants:
    - full_name joins first and last name with one space and trims the outer edges only
    - is_email_valid() checks shape only: non-blank and contains "@"
    - created_at is timezone-aware UTC
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog_api.core.identifiers import is_blank


@dataclass
class User:
    """Catalog user account."""

    id: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def is_email_valid(self) -> bool:
        return not is_blank(self.email) and "@" in self.email
