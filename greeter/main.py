"""Greeting service application"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from greeter import CONFIG, __version__
from greeter.routers import greeting_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the application and mount the greeting router under the API prefix."""
    app = FastAPI(title=CONFIG.main.app_name, version=__version__)
    app.include_router(greeting_router.router, prefix=CONFIG.main.api_prefix)
    _register_error_handlers(app)
    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def on_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
        # the server logs the traceback when the error is re-raised
        logger.error(f"Unhandled error while serving {request.url.path}: {exc!r}")
        return PlainTextResponse(
            HTTPStatus.INTERNAL_SERVER_ERROR.phrase,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        )


app = create_app()
