from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from creatorhub_web.application.ports.csrf_token_port import CsrfTokenPort
from creatorhub_web.application.ports.footage_port import FootagePort
from creatorhub_web.config import Settings
from creatorhub_web.domain.model import AntiForgeryToken, CookieSpec, Footage, FootageId
from creatorhub_web.domain.page_outcome import PageOutcome, after_resource_fetch, after_token_issue
from creatorhub_web.domain.session import read_session

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FootageDetailResult:
    outcome: PageOutcome
    footage: Footage | None = None
    token: AntiForgeryToken | None = field(default=None, repr=False)
    redirect_to: str | None = None
    cookies: tuple[CookieSpec, ...] = ()

    @property
    def logged_in(self) -> bool:
        return self.outcome is PageOutcome.RENDER

    def props(self) -> dict[str, Any]:
        """Render state handed to the page. Only meaningful for RENDER."""
        if self.outcome is not PageOutcome.RENDER or self.footage is None or self.token is None:
            raise ValueError(f"no render props for outcome {self.outcome.value}")
        return {
            "footage": self.footage.to_payload(),
            "token": self.token.token,
            "loggedIn": True,
        }


class LoadFootageDetailUseCase:
    """Server-side step of the footage detail page.

    Runs once per request, one network call at a time: fetch the footage, then
    (only with a session) issue an anti-forgery token. Every failure collapses to
    NOT_FOUND or LOGIN_REDIRECT; nothing is retried.
    """

    def __init__(self, footage: FootagePort, tokens: CsrfTokenPort, settings: Settings) -> None:
        self.footage = footage
        self.tokens = tokens
        self.settings = settings

    def _terminal(self, outcome: PageOutcome, footage_id: str) -> FootageDetailResult:
        logger.info("footage %s -> %s", footage_id, outcome.value)
        if outcome is PageOutcome.LOGIN_REDIRECT:
            return FootageDetailResult(outcome, redirect_to=self.settings.login_path)
        return FootageDetailResult(outcome)

    def execute(self, footage_id: str, cookies: Mapping[str, str]) -> FootageDetailResult:
        session = read_session(cookies, self.settings.session_cookie)
        try:
            fid = FootageId(footage_id)
        except ValueError:
            return self._terminal(PageOutcome.NOT_FOUND, footage_id)

        footage = self.footage.fetch(fid, session)
        early = after_resource_fetch(footage is not None, session is not None)
        if early is not None:
            return self._terminal(early, fid)

        if session is None:
            return self._terminal(PageOutcome.LOGIN_REDIRECT, fid)
        token = self.tokens.issue(session)
        outcome = after_token_issue(token is not None)
        if outcome is not PageOutcome.RENDER or token is None:
            return self._terminal(outcome, fid)

        cookie = self.tokens.cookie_for(token)
        logger.info("footage %s -> render (token cookie domain=%s)", fid, cookie.domain)
        return FootageDetailResult(outcome, footage=footage, token=token, cookies=(cookie,))
