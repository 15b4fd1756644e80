"""JSON-file implementation of SettingsRepository."""

from backend.app.db.json_store import JsonStore
from backend.app.models.common import merge_fields
from backend.app.models.settings import SettingsDocument, SettingsUpdate

SETTINGS_FILE = "settings.json"


class JsonSettingsRepository:
    """Settings singleton backed by its own JSON file."""

    def __init__(
        self, store: JsonStore, filename: str = SETTINGS_FILE, default_currency: str = "USD"
    ) -> None:
        self._store = store
        self._filename = filename
        self._default_currency = default_currency

    def _default(self) -> SettingsDocument:
        return SettingsDocument(version=1, default_currency=self._default_currency)

    async def init_settings(self) -> SettingsDocument:
        """Create the settings file with defaults if it is missing."""
        return await self._store.ensure(self._filename, self._default())

    async def get_settings(self) -> SettingsDocument:
        """Get settings, initializing the file on first access."""
        settings = await self._store.read(self._filename, SettingsDocument)
        if settings is None:
            return await self.init_settings()
        return settings

    async def update_settings(self, updates: SettingsUpdate) -> SettingsDocument:
        """Merge updates over the stored settings and bump the version."""

        def transform(current: SettingsDocument | None) -> SettingsDocument:
            settings = current or self._default()
            return merge_fields(settings, updates, version=settings.version + 1)

        return await self._store.update(self._filename, SettingsDocument, transform)
