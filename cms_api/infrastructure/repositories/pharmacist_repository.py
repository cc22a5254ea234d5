"""Read access to the pharmacist registry."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from cms_api.domain.entities import Pharmacist
from cms_api.infrastructure.models import PharmacistModel


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PharmacistRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, limit: int | None = None) -> Sequence[Pharmacist]:
        query = self.session.query(PharmacistModel).order_by(PharmacistModel.id)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def search(self, term: str) -> Sequence[Pharmacist]:
        """Return pharmacists whose name, licence, province or address contains ``term``."""

        pattern = f"%{_escape_like(term)}%"
        query = (
            self.session.query(PharmacistModel)
            .filter(
                or_(
                    PharmacistModel.name.ilike(pattern, escape="\\"),
                    PharmacistModel.registration_id.ilike(pattern, escape="\\"),
                    PharmacistModel.province.ilike(pattern, escape="\\"),
                    PharmacistModel.address.ilike(pattern, escape="\\"),
                )
            )
            .order_by(PharmacistModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, pharmacist_id: int) -> Pharmacist | None:
        model = self.session.get(PharmacistModel, pharmacist_id)
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: PharmacistModel) -> Pharmacist:
        return Pharmacist(
            id=model.id,
            name=model.name,
            registration_id=model.registration_id,
            province=model.province,
            status=model.status,
            address=model.address,
            expiry_date=model.expiry_date,
            image_url=model.image_url,
        )


__all__ = ["PharmacistRepository"]
