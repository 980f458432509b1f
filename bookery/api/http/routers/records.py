"""Routes shared by every record type.

All four record types expose the same create, get, search, update, delete
and count endpoints. :func:`build_record_router` registers them for one type;
rentals replace the plain reads with joined ones.
"""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from loguru import logger
from pydantic import BaseModel

from bookery.core.exceptions import ValidationError
from bookery.core.services.records import RecordService
from bookery.entities import DeletePayload


def parse_record_id(raw: str) -> UUID:
    """Parse a path id, answering 400 when it is not a UUID."""
    try:
        return UUID(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Malformed id: {raw!r}"
        ) from None


def require_token(token: str | None) -> str:
    """The search term; an absent ``token`` parameter is a bad request."""
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing query parameter: token",
        )
    return token


def build_record_router(
    prefix: str,
    entity_type: type[BaseModel],
    payload_type: type[BaseModel],
    update_payload_type: type[BaseModel],
    service_dependency: Callable[..., RecordService[Any, Any]],
    *,
    include_reads: bool = True,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    @router.post("/create", status_code=status.HTTP_201_CREATED, response_model=UUID)
    def create(
        payload: payload_type,  # type: ignore[valid-type]
        service: RecordService = Depends(service_dependency),
    ) -> UUID:
        try:
            return service.create(payload)
        except ValidationError as e:
            logger.info("Rejected new {}: {}", service.name, e)
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
            ) from e

    if include_reads:

        @router.get("/get/{record_id}", response_model=entity_type)
        def get(record_id: str, service: RecordService = Depends(service_dependency)):
            found = service.get(parse_record_id(record_id))
            if found is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
            return found

        @router.get("/search", response_model=list[entity_type])  # type: ignore[valid-type]
        def search(
            token: str | None = None,
            service: RecordService = Depends(service_dependency),
        ):
            return service.search(require_token(token))

    @router.post("/update", status_code=status.HTTP_202_ACCEPTED, response_model=UUID)
    def update(
        payload: update_payload_type,  # type: ignore[valid-type]
        service: RecordService = Depends(service_dependency),
    ) -> UUID:
        # Unlike create, a rejected update answers 500
        try:
            return service.update(payload)
        except ValidationError as e:
            logger.warning("Rejected update of {} {}: {}", service.name, payload.id, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            ) from e

    @router.post(
        "/delete", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
    )
    def delete(
        payload: DeletePayload,
        service: RecordService = Depends(service_dependency),
    ) -> Response:
        deleted = service.delete(payload.id)
        logger.info("{} {} deleted", service.name.capitalize(), deleted)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get("/count", response_model=int)
    def count(service: RecordService = Depends(service_dependency)) -> int:
        return service.count()

    return router
