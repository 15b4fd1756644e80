"""Place search - cached places first, then the sample fallback."""

import logging

from backend.app.adapters.fixtures import fetch_sample_places
from backend.app.db.repositories import PlaceRepository
from backend.app.models.places import Place

logger = logging.getLogger(__name__)


async def search_places(repo: PlaceRepository, query: str, api_key: str = "") -> list[Place]:
    """Search places for a query.

    Args:
        repo: Places cache
        query: Free-text query
        api_key: External places API key; without one only sample data is served

    Returns:
        Cached matches if any, otherwise matching sample places
    """
    cached = await repo.search_places(query)
    if cached:
        return cached

    if api_key:
        logger.info("Places API key configured, external lookup disabled, serving samples")

    return fetch_sample_places(query)
