import logging
from typing import Any

logger = logging.getLogger(__name__)


class LoggingToastAdapter:
    """Writes toasts to the log. Errors go out at WARNING."""

    def notify(self, event: str, payload: dict[str, Any]) -> None:
        level = logging.WARNING if event.endswith(".error") else logging.INFO
        logger.log(level, "[%s] %s", event, payload.get("message", ""))


class EchoToastAdapter:
    """Prints toasts through a callable, e.g. ``typer.echo``."""

    def __init__(self, echo: Any) -> None:
        self._echo = echo

    def notify(self, event: str, payload: dict[str, Any]) -> None:
        self._echo(f"[{event}] {payload.get('message', '')}")
