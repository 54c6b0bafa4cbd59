import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .candidates import get_candidate_pool
from .config import APP_NAME, CORS_ALLOWED_ORIGINS, HOST, LOG_LEVEL, PORT
from .deps import get_match_service, get_storage
from .http_helpers import format_validation_errors
from .routes import include_modular_routers

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME)
include_modular_routers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Match-Source"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": format_validation_errors(list(exc.errors()))})


@app.on_event("startup")
def on_startup() -> None:
    get_storage()
    pool = get_candidate_pool()
    service = get_match_service()
    live = getattr(service.primary, "configured", False)
    logger.info("[STARTUP] candidates=%d shape=%s live_matcher=%s", len(pool), service.shape, live)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


def run() -> None:
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
