"""Blog Service — posts, category pages and tag search.

Invariants:
    - Category pages only show published posts
    - tags filter is a substring match on the encoded tag list
    - Newest posts first
"""

from typing import Any

from sqlalchemy import String, cast, or_

from cynova.core.pagination import PageRequest
from cynova.models.blog import Blog
from cynova.schemas.blog import BlogOut
from cynova.services.resource_service import ResourceLabels, ResourceService


class BlogService(ResourceService[Blog]):
    labels = ResourceLabels(
        plural="blogs",
        singular="blog",
        id_label="du blog",
        not_found="Blog non trouvé",
        created="Blog créé avec succès",
        updated="Blog mis à jour avec succès",
        deleted="Blog supprimé avec succès",
        conflict="Un blog avec ce titre existe déjà",
    )
    output = BlogOut

    def default_order(self):
        return (Blog.created_at.desc(), Blog.id)

    def filters(
        self,
        *,
        q: str | None = None,
        categorie: str | None = None,
        auteur: str | None = None,
        publie: bool | None = None,
        tags: str | None = None,
    ) -> list[Any]:
        where: list[Any] = []
        if q:
            where.append(or_(
                Blog.titre.contains(q, autoescape=True),
                Blog.contenu.contains(q, autoescape=True),
            ))
        if categorie:
            where.append(Blog.categorie == categorie)
        if auteur:
            where.append(Blog.auteur == auteur)
        if publie is not None:
            where.append(Blog.publie.is_(publie))
        if tags:
            where.append(cast(Blog.tags, String).contains(tags, autoescape=True))
        return where

    async def list_by_category(self, categorie: str, page: PageRequest) -> dict[str, Any]:
        return await self.list_page(
            [Blog.categorie == categorie, Blog.publie.is_(True)], page,
        )
