from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .catalog.models import DrinkRecord
from .catalog.store import DrinkCatalog
from .errors import CatalogError, EmptyCatalogError, InvalidDishError
from .pairing.flavours import TRENDING_DISHES
from .pairing.models import PairingResult
from .pairing.service import PairingService

logger = logging.getLogger(__name__)


def get_catalog(request: Request) -> DrinkCatalog:
    return request.app.state.catalog


def get_service(request: Request) -> PairingService:
    return request.app.state.pairing_service


def _all_drinks(catalog: DrinkCatalog) -> tuple[DrinkRecord, ...]:
    try:
        return catalog.get_all_drinks()
    except CatalogError:
        logger.exception("Error loading drinks")
        raise HTTPException(status_code=500, detail="Failed to fetch drinks")


def create_app(
    catalog: DrinkCatalog | None = None,
    service: PairingService | None = None,
) -> FastAPI:
    """Build the API around an explicit catalogue and pairing service."""
    if catalog is None:
        catalog = service.catalog if service is not None else DrinkCatalog()
    if service is None:
        service = PairingService(catalog)

    app = FastAPI(title="British Drink Pairing API", version="0.1.0")
    app.state.catalog = catalog
    app.state.pairing_service = service

    # ── Public endpoints ─────────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/drinks", response_model=list[DrinkRecord])
    def list_drinks(catalog: DrinkCatalog = Depends(get_catalog)) -> list[DrinkRecord]:
        return list(_all_drinks(catalog))

    @app.get("/api/drinks/search", response_model=list[DrinkRecord])
    def search_drinks(
        q: str = Query(default=""),
        catalog: DrinkCatalog = Depends(get_catalog),
    ) -> list[DrinkRecord]:
        _all_drinks(catalog)
        return catalog.search_drinks(q)

    @app.get("/api/drinks/type/{drink_type}", response_model=list[DrinkRecord])
    def drinks_by_type(
        drink_type: str,
        catalog: DrinkCatalog = Depends(get_catalog),
    ) -> list[DrinkRecord]:
        _all_drinks(catalog)
        return catalog.get_drinks_by_type(drink_type)

    @app.get("/api/drinks/{drink_id}", response_model=DrinkRecord)
    def get_drink(
        drink_id: int,
        catalog: DrinkCatalog = Depends(get_catalog),
    ) -> DrinkRecord:
        _all_drinks(catalog)
        drink = catalog.get_drink(drink_id)
        if drink is None:
            raise HTTPException(status_code=404, detail="Drink not found")
        return drink

    @app.get("/api/trending")
    def trending() -> dict[str, list[str]]:
        return {"dishes": list(TRENDING_DISHES)}

    @app.get("/api/pairing", response_model=PairingResult)
    def pairing(
        dish: str | None = Query(default=None),
        service: PairingService = Depends(get_service),
    ) -> PairingResult:
        try:
            return service.get_pairing(dish)
        except InvalidDishError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except EmptyCatalogError as e:
            raise HTTPException(status_code=500, detail=str(e))
        except CatalogError:
            logger.exception("Error loading drinks for pairing")
            raise HTTPException(status_code=500, detail="Failed to generate drink pairing")

    # ── Admin endpoints ──────────────────────────────────────────────────────

    @app.get("/analytics")
    def analytics() -> dict:
        return compute_analytics(get_events())

    @app.get("/cache/stats")
    def cache_stats(service: PairingService = Depends(get_service)) -> dict:
        return service.cache.stats()

    return app


app = create_app()
