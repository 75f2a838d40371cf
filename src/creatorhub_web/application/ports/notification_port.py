from typing import Any, Protocol

BOOKMARK_PENDING = "bookmark.pending"
BOOKMARK_SUCCESS = "bookmark.success"
BOOKMARK_ERROR = "bookmark.error"


class ToastPort(Protocol):
    """Transient user-facing notifications. Payload carries a ``message``."""

    def notify(self, event: str, payload: dict[str, Any]) -> None: ...
