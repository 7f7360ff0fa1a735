"""ORM Records — SQLAlchemy tables backing the optional SQL storage backend.

Import all records here so Base.metadata sees every table.
"""

from catalog_api.models.product import ProductRecord
from catalog_api.models.user import UserRecord

__all__ = ["ProductRecord", "UserRecord"]
