from __future__ import annotations

import logging
from typing import Any, Mapping

from creatorhub_web.application.ports.csrf_token_port import CsrfTokenPort
from creatorhub_web.application.ports.http_client_port import HttpClientPort, HttpTransportError
from creatorhub_web.config import Settings
from creatorhub_web.domain.cookie_policy import derive_cookie_domain
from creatorhub_web.domain.model import AntiForgeryToken, CookieSpec

logger = logging.getLogger(__name__)


class CsrfTokenManager(CsrfTokenPort):
    """Protocol helper around the anti-forgery token.

    Holds no token state: ``issue`` asks the API for a token bound to the session,
    ``rotate`` adopts the token carried by a mutation response and ``cookie_for``
    scopes the token cookie to the parent domain of the API. Values are never logged.
    """

    def __init__(self, http: HttpClientPort, settings: Settings) -> None:
        self.http = http
        self.settings = settings

    def issue(self, session: str) -> AntiForgeryToken | None:
        url = f"{self.settings.api_base}/user/state"
        try:
            resp = self.http.post(url, headers={"Authorization": f"User {session}"})
        except HttpTransportError:
            logger.info("token issuance: transport error, session not trusted")
            return None
        if not resp.ok:
            logger.info("token issuance: status %s, session not trusted", resp.status_code)
            return None
        try:
            data = resp.json()
            token = AntiForgeryToken(token=str(data.get("token") or ""), state=str(data.get("state") or ""))
        except (ValueError, AttributeError) as e:
            logger.warning("token issuance: unusable body (%s)", type(e).__name__)
            return None
        if not token:
            logger.info("token issuance: empty token, session not trusted")
            return None
        return token

    @staticmethod
    def rotate(current: AntiForgeryToken, mutation_response: Mapping[str, Any]) -> AntiForgeryToken:
        """Adopts the token embedded in a successful mutation response.

        Raises ValueError when the response carries no token, since the current
        one has already been spent.
        """
        nxt = mutation_response.get("csrf")
        if not isinstance(nxt, str) or not nxt:
            raise ValueError("mutation response carries no csrf token")
        return AntiForgeryToken(token=nxt, state=current.state)

    def cookie_for(self, token: AntiForgeryToken) -> CookieSpec:
        scope = derive_cookie_domain(self.settings.api_url, development=self.settings.is_development)
        return CookieSpec(name=self.settings.xsrf_cookie, value=token.token, domain=scope.attribute)
