"""Product Service — catalog listing, search and CRUD for products.

Invariants:
    - List and search only ever return active products (actif = True)
    - yukaMin / prixMin / prixMax are inclusive bounds
    - q matches nom OR description (case-sensitive substring)
    - Newest products first
"""

from typing import Any

from sqlalchemy import or_

from cynova.models.product import Product
from cynova.schemas.product import ProductOut
from cynova.services.resource_service import ResourceLabels, ResourceService


class ProductService(ResourceService[Product]):
    labels = ResourceLabels(
        plural="produits",
        singular="produit",
        id_label="du produit",
        not_found="Produit non trouvé",
        created="Produit créé avec succès",
        updated="Produit mis à jour avec succès",
        deleted="Produit supprimé avec succès",
        conflict="Un produit avec ce nom existe déjà",
    )
    output = ProductOut

    def default_order(self):
        return (Product.created_at.desc(), Product.id)

    def filters(
        self,
        *,
        q: str | None = None,
        categorie: str | None = None,
        yuka_min: int | None = None,
        prix_min: float | None = None,
        prix_max: float | None = None,
    ) -> list[Any]:
        where: list[Any] = [Product.actif.is_(True)]
        if q:
            where.append(or_(
                Product.nom.contains(q, autoescape=True),
                Product.description.contains(q, autoescape=True),
            ))
        if categorie:
            where.append(Product.categorie == categorie)
        if yuka_min is not None:
            where.append(Product.yuka_score >= yuka_min)
        if prix_min is not None:
            where.append(Product.prix >= prix_min)
        if prix_max is not None:
            where.append(Product.prix <= prix_max)
        return where
