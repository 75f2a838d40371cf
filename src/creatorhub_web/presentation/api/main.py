from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from creatorhub_web.config import configure_logging
from creatorhub_web.presentation.api.metrics import registry
from creatorhub_web.presentation.api.routes.footage import router as footage_router
from creatorhub_web.presentation.api.routes.health import router as health_router

configure_logging()

app = FastAPI(title="CreatorHub Web", version="0.1.0")
app.include_router(health_router)
app.include_router(footage_router)


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
