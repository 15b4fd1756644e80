"""Settings endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from backend.app.db.engine import get_settings_repository
from backend.app.db.repositories import SettingsRepository
from backend.app.models.settings import SettingsDocument, SettingsUpdate

router = APIRouter(prefix="/settings", tags=["settings"])

Repo = Annotated[SettingsRepository, Depends(get_settings_repository)]


@router.get("", response_model=SettingsDocument)
async def get_settings_document(repo: Repo) -> SettingsDocument:
    """Get settings."""
    return await repo.get_settings()


@router.patch("", response_model=SettingsDocument)
async def update_settings_document(request: SettingsUpdate, repo: Repo) -> SettingsDocument:
    """Update settings."""
    return await repo.update_settings(request)
