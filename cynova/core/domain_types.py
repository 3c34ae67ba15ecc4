"""Domain Types — closed value sets for catalog enum fields.

Invariants:
    - Enum values are the exact strings stored in the DB and sent on the wire
    - No raw string matching on these fields outside the enums

Design Decisions:
    - str Enums: serialize to JSON without custom encoders, pydantic validates membership
"""

from enum import Enum
from typing import NewType

RecordId = NewType("RecordId", str)


class ProductCategory(str, Enum):
    """Product families sold in the shop."""
    SHAMPOING = "shampoing"
    SAVON = "savon"
    CREME = "crème"
    HUILE = "huile"
    MASQUE = "masque"
    GOMMAGE = "gommage"


class BlogCategory(str, Enum):
    """Editorial sections of the blog."""
    INGREDIENTS = "ingrédients"
    CONSEILS = "conseils"
    DIY = "DIY"
    SANTE = "santé"
    RECETTES = "recettes"


class UserRole(str, Enum):
    """Account roles — admin or standard customer."""
    ADMIN = "ADMIN"
    USER = "USER"


DEFAULT_BLOG_AUTHOR = "Équipe Cynova"
