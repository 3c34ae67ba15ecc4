"""User Schemas — account validation; the password never appears in output.

Invariants:
    - UserOut has no password field at all (not merely excluded)
    - Passwords are capped at bcrypt's 72-byte input (UTF-8), not just 128 chars
    - LoginRequest accepts missing fields so the service can answer 400 itself
"""

from typing import Annotated

from pydantic import AfterValidator, EmailStr, Field

from cynova.core.domain_types import UserRole
from cynova.infrastructure.security import BCRYPT_MAX_BYTES
from cynova.schemas.common import PartialWireModel, RecordOut, WireModel


def _fits_bcrypt(value: str) -> str:
    if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"length must be less than or equal to {BCRYPT_MAX_BYTES} bytes")
    return value


Password = Annotated[
    str, Field(min_length=8, max_length=128), AfterValidator(_fits_bcrypt),
]
Name = Annotated[str, Field(max_length=100)]
Adresse = Annotated[str, Field(max_length=200)]
Telephone = Annotated[str, Field(max_length=20)]


class UserCreate(WireModel):
    email: EmailStr
    mot_de_passe: Password
    nom: Name | None = None
    prenom: Name | None = None
    role: UserRole = UserRole.USER
    adresse: Adresse | None = None
    telephone: Telephone | None = None
    newsletter: bool = False


class UserUpdate(PartialWireModel):
    email: EmailStr | None = None
    mot_de_passe: Password | None = None
    nom: Name | None = None
    prenom: Name | None = None
    role: UserRole | None = None
    adresse: Adresse | None = None
    telephone: Telephone | None = None
    newsletter: bool | None = None


class LoginRequest(WireModel):
    email: str | None = None
    mot_de_passe: str | None = None


class UserOut(RecordOut):
    email: str
    nom: str | None = None
    prenom: str | None = None
    role: str
    adresse: str | None = None
    telephone: str | None = None
    newsletter: bool
