from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from attachment_figures import router as attachment_figures_router
from attachment_joins import router as attachment_joins_router
from core import config
from core.db import Database
from core.errors import ApiError, InternalError
from core.logging_setup import configure_logging
from descendants import router as descendants_router

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process; a failed connection aborts startup.
    app.state.db = await Database.connect(
        config.database_url(),
        min_size=config.pool_min_size(),
        max_size=config.pool_max_size(),
        command_timeout=config.command_timeout(),
    )
    try:
        yield
    finally:
        await app.state.db.close()
        app.state.db = None


app = FastAPI(title="ahnenbaum-api", lifespan=lifespan)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed path=%s code=%s error=%s", request.url.path, exc.code, exc.message)
    else:
        logger.warning("request_rejected path=%s code=%s error=%s", request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Missing fields, wrong types and malformed JSON all end up here.
    message = "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
    ) or "Invalid request."
    logger.warning("request_rejected path=%s code=validation_error error=%s", request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message, "code": "validation_error"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_failed path=%s code=internal_error", request.url.path)
    error = InternalError(str(exc) or exc.__class__.__name__)
    return JSONResponse(status_code=error.status_code, content=error.to_response())


app.include_router(descendants_router.router, tags=["descendants"])
app.include_router(attachment_figures_router.router, tags=["attachment_figures"])
app.include_router(attachment_joins_router.router, tags=["attachment_joins"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "ahnenbaum api"}


def run() -> None:
    uvicorn.run(app, host=config.host(), port=config.port())


if __name__ == "__main__":
    run()
