"""Costumer endpoints."""

from bookery.api.http.deps import get_costumer_service
from bookery.api.http.routers.records import build_record_router
from bookery.entities import Costumer, CostumerPayload, CostumerUpdatePayload

router = build_record_router(
    "/costumer", Costumer, CostumerPayload, CostumerUpdatePayload, get_costumer_service
)
