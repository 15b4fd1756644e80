"""Static sample places used when no places API key is configured."""

from backend.app.models.common import PlaceProvider
from backend.app.models.places import Place

SAMPLE_PLACES: list[Place] = [
    Place(
        id="mock-1",
        name="Hoan Kiem Lake",
        lat=21.0285,
        lng=105.8542,
        address="Hanoi, Vietnam",
        provider=PlaceProvider.custom,
    ),
    Place(
        id="mock-2",
        name="Old Quarter",
        lat=21.0353,
        lng=105.8495,
        address="Hanoi, Vietnam",
        provider=PlaceProvider.custom,
    ),
    Place(
        id="mock-3",
        name="Fansipan Peak",
        lat=22.3025,
        lng=103.7751,
        address="Sapa, Vietnam",
        provider=PlaceProvider.custom,
    ),
    Place(
        id="mock-4",
        name="Sapa Town",
        lat=22.3363,
        lng=103.8438,
        address="Sapa, Vietnam",
        provider=PlaceProvider.custom,
    ),
]


def fetch_sample_places(query: str) -> list[Place]:
    """Sample places whose name or address contains query (case-insensitive)."""
    needle = query.lower()
    return [
        p
        for p in SAMPLE_PLACES
        if needle in p.name.lower() or (p.address is not None and needle in p.address.lower())
    ]
