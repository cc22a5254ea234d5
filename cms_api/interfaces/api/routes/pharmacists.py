"""Public pharmacist registry lookup."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from cms_api.application.use_cases.pharmacists import (
    get_pharmacist,
    search_pharmacists,
)
from cms_api.infrastructure.database import get_db
from cms_api.interfaces.api.routes_helpers import to_http_exception
from cms_api.interfaces.api.schemas import PharmacistRead

router = APIRouter(prefix="/pharmacists", tags=["pharmacists"])


@router.get("", response_model=list[PharmacistRead])
def list_pharmacists(
    q: str | None = Query(None, description="Name, licence number, province or address"),
    db: Session = Depends(get_db),
):
    return [PharmacistRead.model_validate(item) for item in search_pharmacists(db, q)]


@router.get("/{pharmacist_id}", response_model=PharmacistRead)
def read_pharmacist(pharmacist_id: int, db: Session = Depends(get_db)):
    try:
        pharmacist = get_pharmacist(db, pharmacist_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PharmacistRead.model_validate(pharmacist)
