import logging
from datetime import datetime, timezone

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from teamsrelay import __version__ as API_VERSION
from teamsrelay.config import Settings, get_settings, settings
from teamsrelay.middleware import RequestSizeLimitMiddleware, SecurityHeadersMiddleware
from teamsrelay.routers import chromatic

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Relay Chromatic webhooks to Microsoft Teams as Adaptive Cards.",
    version=API_VERSION,
    debug=settings.debug,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.add_middleware(RequestSizeLimitMiddleware)
app.add_middleware(SecurityHeadersMiddleware)


# --- Exception Handlers ---


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.status_code, "message": exc.detail}},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": {"code": 500, "message": "Internal server error"}},
    )


# --- Routes ---

app.include_router(chromatic.router)


@app.get("/", summary="API root")
async def root(current: Settings = Depends(get_settings)):
    return {"name": current.app_name, "status": "ok", "version": API_VERSION}


@app.get("/health", summary="Health check")
async def health_ping(current: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
        "checks": {
            "teams_webhook": "configured" if current.teams_webhook_url else "missing",
        },
    }


def run() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not settings.teams_webhook_url:
        logger.warning("TEAMS_WEBHOOK_URL is not set; notifications will fail to deliver")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
