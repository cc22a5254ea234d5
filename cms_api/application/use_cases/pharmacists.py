"""Use cases for the public pharmacist registry lookup."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from cms_api.domain.entities import Pharmacist
from cms_api.domain.exceptions import NotFoundError
from cms_api.infrastructure.repositories import PharmacistRepository

UNFILTERED_LIMIT = 50


def search_pharmacists(session: Session, query: str | None = None) -> Sequence[Pharmacist]:
    """Search the registry; without a query return the first entries by id."""

    repository = PharmacistRepository(session)
    term = (query or "").strip()
    if not term:
        return repository.list(limit=UNFILTERED_LIMIT)
    return repository.search(term)


def get_pharmacist(session: Session, pharmacist_id: int) -> Pharmacist:
    pharmacist = PharmacistRepository(session).get(pharmacist_id)
    if pharmacist is None:
        raise NotFoundError("Pharmacist not found")
    return pharmacist


__all__ = ["UNFILTERED_LIMIT", "get_pharmacist", "search_pharmacists"]
