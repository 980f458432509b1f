"""Rental endpoints.

``get`` and ``search`` answer with the views joined on customer and book
names; ``get-raw`` and ``search-raw`` answer with the stored rentals.
"""

from fastapi import Depends, HTTPException, status

from bookery.api.http.deps import get_rental_service
from bookery.api.http.routers.records import (
    build_record_router,
    parse_record_id,
    require_token,
)
from bookery.core.services.records import RentalService
from bookery.entities import Rental, RentalPayload, RentalUpdatePayload, RentalView

router = build_record_router(
    "/rental",
    Rental,
    RentalPayload,
    RentalUpdatePayload,
    get_rental_service,
    include_reads=False,
)


@router.get("/get/{record_id}", response_model=RentalView)
def get_rental(record_id: str, service: RentalService = Depends(get_rental_service)):
    found = service.get_joined(parse_record_id(record_id))
    if found is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return found


@router.get("/get-raw/{record_id}", response_model=Rental)
def get_raw_rental(record_id: str, service: RentalService = Depends(get_rental_service)):
    found = service.get(parse_record_id(record_id))
    if found is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return found


@router.get("/search", response_model=list[RentalView])
def search_rentals(
    token: str | None = None, service: RentalService = Depends(get_rental_service)
):
    return service.search_joined(require_token(token))


@router.get("/search-raw", response_model=list[Rental])
def search_raw_rentals(
    token: str | None = None, service: RentalService = Depends(get_rental_service)
):
    return service.search(require_token(token))
