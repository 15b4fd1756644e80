"""Whole-file JSON storage for collection documents.

Each collection (trips, places, settings) is one JSON file under the data
directory. Reads return None for a missing file. Writes overwrite the whole
file in place with no atomic rename, so a crash mid-write leaves a file that
fails to parse on the next read.
"""

import asyncio
import inspect
import time
from collections import defaultdict
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from backend.app.db.mutation_queue import MutationQueue
from backend.app.utils.logging import StructuredStoreLogger
from backend.app.utils.metrics import PrometheusStoreMetrics

M = TypeVar("M", bound=BaseModel)

Transform = Callable[[M | None], M | Awaitable[M]]


class StoreError(Exception):
    """Base class for store failures surfaced to callers."""

    pass


class CollectionCorruptedError(StoreError):
    """A collection file exists but does not parse as its declared model."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Collection file {filename!r} is corrupted: {reason}")
        self.filename = filename
        self.reason = reason


class JsonStore:
    """JSON file store with serialized read-modify-write per file."""

    def __init__(
        self,
        data_dir: str | Path,
        queue: MutationQueue | None = None,
        logger: StructuredStoreLogger | None = None,
        metrics: PrometheusStoreMetrics | None = None,
    ) -> None:
        """Initialize store.

        Args:
            data_dir: Directory holding the collection files (created on demand)
            queue: Mutation queue; a fresh one per store by default
            logger: Structured logger
            metrics: Metrics recorder
        """
        self._data_dir = Path(data_dir)
        # Raw file access per filename; a reader never sees a half-written file
        self._io_locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        self.queue = queue or MutationQueue()
        self._logger = logger or StructuredStoreLogger()
        self._metrics = metrics or PrometheusStoreMetrics()

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, name: str) -> Path:
        return self._data_dir / name

    def ensure_dir(self) -> None:
        """Create the data directory (and parents) if missing."""
        self._data_dir.mkdir(parents=True, exist_ok=True)

    async def read(self, name: str, model: type[M]) -> M | None:
        """Read and validate a whole collection file.

        Args:
            name: Filename inside the data directory
            model: Model the file content must validate against

        Returns:
            Parsed model, or None if the file does not exist

        Raises:
            CollectionCorruptedError: File content is not valid for model
            OSError: Any storage failure other than a missing file
        """
        self.ensure_dir()
        path = self.path_for(name)

        try:
            async with self._io_locks[name]:
                content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError:
            return None

        try:
            return model.model_validate_json(content)
        except ValidationError as e:
            self._logger.log_corrupted(name, f"{e.error_count()} validation errors")
            raise CollectionCorruptedError(name, str(e)) from e

    async def write(self, name: str, value: BaseModel) -> None:
        """Overwrite a collection file with value.

        Keys are written camelCase in field order, two-space indented.
        """
        self.ensure_dir()
        content = value.model_dump_json(by_alias=True, exclude_none=True, indent=2)
        path = self.path_for(name)

        async with self._io_locks[name]:
            await asyncio.to_thread(path.write_text, content + "\n", encoding="utf-8")

    async def ensure(self, name: str, default: M) -> M:
        """Return the stored value, writing default first if the file is absent.

        Runs in the file's mutation queue so it cannot overwrite a concurrent first write.
        """

        async def initialize() -> M:
            existing = await self.read(name, type(default))
            if existing is not None:
                return existing

            await self.write(name, default)
            self._logger.log_initialized(name)
            return default

        return await self.queue.run(name, initialize)

    async def update(self, name: str, model: type[M], transform: Transform[M]) -> M:
        """Serialized read-transform-write on one file.

        Args:
            name: Filename inside the data directory
            model: Model of the file content
            transform: Receives the current value (None if absent), returns the
                next value. May be a coroutine function.

        Returns:
            The value that was written
        """
        waited = self.queue.pending(name)
        if waited:
            self._metrics.inc_queue_wait(name)

        start = time.perf_counter()

        async def cycle() -> M:
            current = await self.read(name, model)
            updated = transform(current)
            if inspect.isawaitable(updated):
                updated = await updated
            await self.write(name, updated)
            return updated

        try:
            result = await self.queue.run(name, cycle)
        except Exception as e:
            latency_ms = (time.perf_counter() - start) * 1000
            self._metrics.record_latency(name, "error", latency_ms)
            self._metrics.inc_error(name, type(e).__name__)
            self._logger.log_mutation(
                name, "error", latency_ms, waited=waited, error_reason=type(e).__name__
            )
            raise

        latency_ms = (time.perf_counter() - start) * 1000
        self._metrics.record_latency(name, "success", latency_ms)
        self._logger.log_mutation(
            name, "success", latency_ms, waited=waited, version=getattr(result, "version", None)
        )
        return result
