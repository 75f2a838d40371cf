import asyncio

import typer

from creatorhub_web.application.use_cases.load_footage_detail import LoadFootageDetailUseCase
from creatorhub_web.application.use_cases.toggle_bookmark import BookmarkView
from creatorhub_web.config import configure_logging, settings
from creatorhub_web.domain.cookie_policy import derive_cookie_domain
from creatorhub_web.domain.model import Succeeded
from creatorhub_web.infrastructure.adapters.creatorhub.bookmark_client import BookmarkMutationClient
from creatorhub_web.infrastructure.adapters.creatorhub.csrf_token_manager import CsrfTokenManager
from creatorhub_web.infrastructure.adapters.creatorhub.footage_client import FootageApiClient
from creatorhub_web.infrastructure.adapters.http.factory import build_async_http_client, build_http_client
from creatorhub_web.infrastructure.adapters.notification_adapter import EchoToastAdapter

app = typer.Typer(help="CreatorHub footage detail CLI")


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level")) -> None:
    configure_logging(log_level)


@app.command()
def load(footage_id: str, session: str = typer.Option("", "--session", "-s", help="CH-SESSION cookie value")) -> None:
    """Runs the server-side page step and prints its outcome."""
    http = build_http_client(settings)
    uc = LoadFootageDetailUseCase(
        footage=FootageApiClient(http, settings),
        tokens=CsrfTokenManager(http, settings),
        settings=settings,
    )
    result = uc.execute(footage_id, {settings.session_cookie: session} if session else {})
    typer.echo(f"outcome: {result.outcome.value}")
    if result.redirect_to:
        typer.echo(f"redirect: {result.redirect_to}")
    if result.footage is not None:
        typer.echo(f"footage: {result.footage.name} (marked={result.footage.marked})")
    for cookie in result.cookies:
        typer.echo(f"cookie: {cookie.name} domain={cookie.domain or '-'}")


@app.command()
def bookmark(
    footage_id: str,
    session: str = typer.Option(..., "--session", "-s", help="CH-SESSION cookie value"),
    token: str = typer.Option(..., "--token", "-t", help="current XSRF-TOKEN value"),
    marked: bool = typer.Option(False, "--marked", help="footage is currently bookmarked"),
) -> None:
    """Toggles the bookmark once, printing the toasts a page would show."""
    http = build_async_http_client(settings, {settings.session_cookie: session})
    view = BookmarkView(
        footage_id,
        marked=marked,
        token=token,
        client=BookmarkMutationClient(http, settings),
        notifier=EchoToastAdapter(typer.echo),
    )

    async def run() -> None:
        try:
            await view.toggle()
        finally:
            await http.aclose()  # type: ignore[attr-defined]

    asyncio.run(run())
    typer.echo(f"marked: {view.marked}")
    if not isinstance(view.state, Succeeded):
        raise typer.Exit(code=1)


@app.command("cookie-domain")
def cookie_domain(api_url: str, development: bool = typer.Option(False, "--development")) -> None:
    scope = derive_cookie_domain(api_url, development=development)
    typer.echo(scope.attribute or "(host-only)")


if __name__ == "__main__":
    app()
