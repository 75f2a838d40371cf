from __future__ import annotations

from typing import Protocol

from creatorhub_web.domain.model import Footage, FootageId


class FootagePort(Protocol):
    """Reads footage records from the protected resource endpoint."""

    def fetch(self, footage_id: FootageId, session: str | None) -> Footage | None:
        """Returns the record, or None for any failure (absent, error, bad body)."""
        ...
