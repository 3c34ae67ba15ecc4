"""ORM Models — SQLAlchemy declarative models for the four catalog resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - Each model maps exactly one table; no relationships between them

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all/alembic
"""

from cynova.models.product import Product  # noqa: F401
from cynova.models.ingredient import Ingredient  # noqa: F401
from cynova.models.blog import Blog  # noqa: F401
from cynova.models.user import User  # noqa: F401
