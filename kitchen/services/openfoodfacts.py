# kitchen/services/openfoodfacts.py

import logging

import requests

from kitchen.core.config import Settings, settings as default_settings
from kitchen.core.errors import NotFound, UpstreamUnavailable, ValidationError
from kitchen.schemas.enrichment import ProductSuggestion
from kitchen.services.catalog import is_valid_ean13

logger = logging.getLogger("kitchen")

MAX_SUGGESTED_TAGS = 12


def suggest_tags(categories: list[str] | None, labels: list[str] | None) -> list[str]:
    """
    Build tag suggestions from Open Food Facts taxonomy entries.

    "en:plant-based-foods" becomes "PLANT BASED FOODS". Categories come before
    labels, duplicates keep their first position, at most 12 are returned.
    """
    suggestions = []
    for entry in (categories or []) + (labels or []):
        if not isinstance(entry, str):
            continue
        segment = entry.split(":")[-1].strip()
        if not segment:
            continue
        tag = segment.replace("-", " ").replace("_", " ").upper()
        if tag not in suggestions:
            suggestions.append(tag)
    return suggestions[:MAX_SUGGESTED_TAGS]


def lookup_barcode(ean13: str, config: Settings = default_settings) -> ProductSuggestion:
    """
    Fetch name, image and tag suggestions for a barcode.

    Read-only: the caller decides whether to store anything.
    """
    if not is_valid_ean13(ean13):
        raise ValidationError("ean13 must be exactly 13 digits")

    url = f"{config.OPENFOODFACTS_URL.rstrip('/')}/api/v0/product/{ean13}.json"

    try:
        response = requests.get(
            url,
            headers={"User-Agent": config.OPENFOODFACTS_USER_AGENT},
            timeout=config.OPENFOODFACTS_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"Open Food Facts connection error: {str(e)}")
        raise UpstreamUnavailable("Unable to reach Open Food Facts") from e

    if not response.ok:
        logger.error(
            f"Open Food Facts lookup failed. Status: {response.status_code}, Body: {response.text[:200]}"
        )
        raise UpstreamUnavailable("Open Food Facts lookup failed")

    try:
        data = response.json()
    except ValueError as e:
        logger.error("Open Food Facts returned invalid JSON")
        raise UpstreamUnavailable("Invalid response from Open Food Facts") from e

    if not isinstance(data, dict):
        logger.error(f"Open Food Facts returned unexpected payload: {data!r}")
        raise UpstreamUnavailable("Invalid response from Open Food Facts")

    product = data.get("product")
    if data.get("status") != 1 or not isinstance(product, dict):
        raise NotFound("Product not found in Open Food Facts")

    return ProductSuggestion(
        name=product.get("product_name") or product.get("generic_name") or "",
        image_url=product.get("image_front_url") or product.get("image_url") or "",
        tags=suggest_tags(product.get("categories_tags"), product.get("labels_tags")),
    )
