"""Health check endpoints.

- Checks that the data directory exists or can be created
- Returns honest status with component details
"""

import json
from typing import Any

from fastapi import APIRouter, Response

from backend.app.db.engine import get_store
from backend.app.db.json_store import JsonStore

router = APIRouter()


async def check_storage(store: JsonStore) -> tuple[bool, str]:
    """Check the data directory is usable.

    Returns:
        (is_ok, status_message)
    """
    try:
        store.ensure_dir()
        return (True, "ok")
    except OSError as e:
        return (False, f"error: {type(e).__name__}")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz() -> dict[str, Any] | Response:
    """Health check endpoint.

    Returns:
        200 with component status if storage is usable
        503 otherwise
    """
    storage_ok, storage_status = await check_storage(get_store())

    response_body = {
        "status": "ok" if storage_ok else "degraded",
        "components": {"storage": storage_status},
    }

    if not storage_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
