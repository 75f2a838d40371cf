from __future__ import annotations

from typing import Protocol

from creatorhub_web.domain.model import MutationOutcome


class BookmarkPort(Protocol):
    """Toggles the bookmark flag of a footage for the session owner."""

    async def toggle(self, footage_id: str, current_token: str) -> MutationOutcome:
        """Never raises; failures come back as MutationFailed."""
        ...
