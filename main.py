"""
Main API module for the Short-code Platform.

Responsibilities:
    - Expose the create endpoint (POST /, raw URL body -> short URL, 201)
    - Expose the redirect endpoint (GET /{code} -> 307 to the original URL)
    - Map store faults to plain-text HTTP errors (input -> 400, randomness -> 500)
    - Liveness probe at /_health

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The mapping store is injected; by default it comes from the storage factory.
    - Routes and docs that are not short codes live under an underscore prefix,
      which is outside the code alphabet and can never shadow a code.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from shortcode_platform.config import settings
from shortcode_platform.exceptions import InputError, InvalidURLError, RandomnessError
from shortcode_platform.storage.base import BaseMappingStore
from shortcode_platform.storage.storage_factory import get_storage


class HealthResponse(BaseModel):
    """Liveness probe payload."""
    status: str = "ok"


def create_app(store: Optional[BaseMappingStore] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        store (Optional[BaseMappingStore]): Mapping store to serve. A fresh
            store from `get_storage()` is created when omitted.

    Returns:
        FastAPI: A fully configured application owning its own store.
    """
    app = FastAPI(
        title="Short-code Platform",
        description="Bidirectional URL <-> short code mapping with redirects",
        docs_url="/_docs",
        redoc_url=None,
        openapi_url="/_openapi.json",
    )
    log = logging.getLogger("shortcode")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    # ----------------------------------------------------------------
    # Per-app store (isolated for tests, swappable for production)
    # ----------------------------------------------------------------
    if store is None:
        store = get_storage()
    app.state.store = store
    log.info("Short-code storage backend: %s (code length %d)",
             settings.STORAGE_BACKEND, getattr(store, "code_length", settings.CODE_LENGTH))

    # ----------------------------------------------------------------
    # Error mapping
    # ----------------------------------------------------------------
    @app.exception_handler(InputError)
    async def handle_input_error(request: Request, exc: InputError) -> PlainTextResponse:
        log.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(RandomnessError)
    async def handle_randomness_error(request: Request, exc: RandomnessError) -> PlainTextResponse:
        log.error("Short code generation failed: %s", exc)
        return PlainTextResponse(str(exc), status_code=500)

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/_health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse()

    @app.post("/", status_code=201, response_class=PlainTextResponse)
    async def create_short_url(request: Request) -> PlainTextResponse:
        """
        Create (or fetch) the short code for the URL sent as the raw body.

        Returns:
            PlainTextResponse: `{scheme}://{host}/{code}` with status 201.

        Raises:
            InputError: Empty or invalid URL (mapped to 400).
            RandomnessError: Secure random source failed (mapped to 500).
        """
        body = await request.body()
        try:
            original_url = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidURLError() from exc

        code = await run_in_threadpool(store.save, original_url)

        host = request.headers.get("host") or request.url.netloc
        short_url = f"{settings.SCHEME}://{host}/{code}"
        log.info("Short code %s -> %s", code, original_url)
        return PlainTextResponse(short_url, status_code=201)

    @app.get("/{code:path}")
    def redirect_short_url(code: str) -> RedirectResponse:
        """
        Redirect a short code to its original URL.

        Raises:
            InputError: Empty or unknown code (mapped to 400).
        """
        original_url = store.resolve(code)
        log.debug("Redirect %s -> %s", code, original_url)
        return RedirectResponse(url=original_url, status_code=307)

    return app


# `uvicorn main:app` and `from main import app` keep working.
app = create_app()
