"""User-facing settings document."""

from backend.app.models.common import StoredModel


class SettingsDocument(StoredModel):
    """Process-wide settings persisted in their own file."""

    version: int = 1
    default_currency: str = "USD"
    mapbox_token: str | None = None


class SettingsUpdate(StoredModel):
    """Partial update of the settings document. The version is not writable."""

    default_currency: str | None = None
    mapbox_token: str | None = None
