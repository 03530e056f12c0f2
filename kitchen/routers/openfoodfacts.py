# kitchen/routers/openfoodfacts.py

from fastapi import APIRouter, Request

from kitchen.core.rate_limiter import limiter
from kitchen.schemas.enrichment import ProductSuggestion
from kitchen.services.openfoodfacts import lookup_barcode

router = APIRouter(prefix="/openfoodfacts", tags=["Open Food Facts"])


# Every call costs an upstream request
@router.get("/{ean13}", response_model=ProductSuggestion)
@limiter.limit("30/minute")
def lookup_product(request: Request, ean13: str):
    return lookup_barcode(ean13, request.app.state.settings)
