"""User Service — accounts, credential hashing and login.

Invariants:
    - The stored credential is always a bcrypt hash (create and update)
    - Rendered users never carry the hash (UserOut has no such field)
    - Login failures are indistinguishable: unknown email and wrong password
      raise the same InvalidCredentialsError
    - q matches email OR nom OR prenom

Design Decisions:
    - A dummy hash is checked when the email is unknown so both failure paths
      spend the same bcrypt time
"""

import logging
from typing import Any

from sqlalchemy import or_

from cynova.core.errors import (
    ErrorContext, InvalidCredentialsError, MissingCredentialsError,
)
from cynova.infrastructure.security import (
    hash_password, hash_password_async, verify_password_async,
)
from cynova.models.user import User
from cynova.schemas.user import LoginRequest, UserOut
from cynova.services.resource_service import ResourceLabels, ResourceService

logger = logging.getLogger(__name__)

_DUMMY_HASH = hash_password("cynova-timing-equalizer")


class UserService(ResourceService[User]):
    labels = ResourceLabels(
        plural="utilisateurs",
        singular="utilisateur",
        id_label="de l'utilisateur",
        not_found="Utilisateur non trouvé",
        created="Utilisateur créé avec succès",
        updated="Utilisateur mis à jour avec succès",
        deleted="Utilisateur supprimé avec succès",
        conflict="Un utilisateur avec cet email existe déjà",
    )
    output = UserOut
    unique_field = "email"

    def default_order(self):
        return (User.created_at.desc(), User.id)

    def filters(
        self,
        *,
        q: str | None = None,
        role: str | None = None,
        newsletter: bool | None = None,
    ) -> list[Any]:
        where: list[Any] = []
        if q:
            where.append(or_(
                User.email.contains(q, autoescape=True),
                User.nom.contains(q, autoescape=True),
                User.prenom.contains(q, autoescape=True),
            ))
        if role:
            where.append(User.role == role)
        if newsletter is not None:
            where.append(User.newsletter.is_(newsletter))
        return where

    async def prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        data["mot_de_passe"] = await hash_password_async(data["mot_de_passe"])
        return data

    async def prepare_update(self, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("mot_de_passe"):
            data["mot_de_passe"] = await hash_password_async(data["mot_de_passe"])
        return data

    async def login(self, payload: LoginRequest) -> dict[str, Any]:
        if not payload.email or not payload.mot_de_passe:
            raise MissingCredentialsError(ErrorContext(resource=self.labels.plural))

        user = await self.repository.find_one_by(email=payload.email)
        stored_hash = user.mot_de_passe if user is not None else _DUMMY_HASH
        password_ok = await verify_password_async(payload.mot_de_passe, stored_hash)
        if user is None or not password_ok:
            logger.warning(
                "Login rejected", extra={"resource": self.labels.plural},
            )
            raise InvalidCredentialsError(ErrorContext(resource=self.labels.plural))

        logger.info(
            "Login succeeded",
            extra={"resource": self.labels.plural, "record_id": user.id},
        )
        return {"message": "Connexion réussie", self.labels.singular: self.render(user)}
