"""Structured logging for collection file mutations."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class StructuredStoreLogger:
    """Structured logger for store mutations."""

    def log_mutation(
        self,
        filename: str,
        outcome: str,
        latency_ms: float,
        waited: bool = False,
        version: int | None = None,
        error_reason: str | None = None,
    ) -> None:
        """Log one read-transform-write cycle with structured data."""
        log_data: dict[str, Any] = {
            "collection": filename,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
            "waited": waited,
        }

        if version is not None:
            log_data["version"] = version
        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Store mutation: {filename} - {outcome}"

        if outcome == "success":
            logger.debug(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})

    def log_initialized(self, filename: str) -> None:
        """Log that a collection file was created with its default value."""
        logger.info(
            f"Initialized collection: {filename}",
            extra={"structured": {"collection": filename, "outcome": "initialized"}},
        )

    def log_corrupted(self, filename: str, error_reason: str) -> None:
        """Log an unreadable collection file."""
        logger.error(
            f"Corrupted collection: {filename}",
            extra={"structured": {"collection": filename, "error_reason": error_reason}},
        )
