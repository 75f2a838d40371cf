from __future__ import annotations
from collections.abc import Iterator
from fastapi import APIRouter, Depends, Request
from starlette.responses import JSONResponse, RedirectResponse, Response

from creatorhub_web.application.use_cases.load_footage_detail import FootageDetailResult, LoadFootageDetailUseCase
from creatorhub_web.config import settings
from creatorhub_web.domain.page_outcome import PageOutcome
from creatorhub_web.infrastructure.adapters.creatorhub.csrf_token_manager import CsrfTokenManager
from creatorhub_web.infrastructure.adapters.creatorhub.footage_client import FootageApiClient
from creatorhub_web.infrastructure.adapters.http.factory import build_http_client
from creatorhub_web.presentation.api.metrics import PAGE_OUTCOMES

router = APIRouter(prefix="/videos", tags=["footage"])


def get_footage_detail_loader() -> Iterator[LoadFootageDetailUseCase]:
    # Un cliente HTTP por request; la cookie de sesión viaja en headers, no en el jar
    http = build_http_client(settings)
    try:
        yield LoadFootageDetailUseCase(
            footage=FootageApiClient(http, settings),
            tokens=CsrfTokenManager(http, settings),
            settings=settings,
        )
    finally:
        close = getattr(http, "close", None)
        if close is not None:
            close()


def to_response(result: FootageDetailResult) -> Response:
    if result.outcome is PageOutcome.NOT_FOUND:
        return JSONResponse({"notFound": True}, status_code=404)
    if result.outcome is PageOutcome.LOGIN_REDIRECT:
        return RedirectResponse(result.redirect_to or settings.login_path, status_code=307)
    response = JSONResponse({"props": result.props()})
    for cookie in result.cookies:
        # readable by the page scripts, which send it back as a header
        response.set_cookie(cookie.name, cookie.value, domain=cookie.domain, path=cookie.path, httponly=False)
    return response


@router.get("/{footage_id}")
def footage_detail(
    footage_id: str,
    request: Request,
    loader: LoadFootageDetailUseCase = Depends(get_footage_detail_loader),
) -> Response:  # type: ignore[misc]
    result = loader.execute(footage_id, request.cookies)
    PAGE_OUTCOMES.labels(outcome=result.outcome.value).inc()
    return to_response(result)
