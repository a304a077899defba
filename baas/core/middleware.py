# baas/core/middleware.py
from __future__ import annotations

import time

from fastapi import FastAPI, Request, Response
from loguru import logger

ALLOW_HEADERS = (
    "Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization, "
    "accept, origin, Cache-Control, X-Requested-With"
)
ALLOW_METHODS = "POST, OPTIONS, GET, PUT, DELETE"

# seconds
SLOW_REQUEST_THRESHOLD = 1.0


def cors_headers(origin: str | None) -> dict[str, str]:
    """CORS headers for a response; the caller's origin is echoed so credentials work."""
    return {
        "Access-Control-Allow-Origin": origin or "*",
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
    }


async def cors_middleware(request: Request, call_next):
    headers = cors_headers(request.headers.get("origin"))
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=headers)

    response = await call_next(request)
    response.headers.update(headers)
    if request.headers.get("origin"):
        response.headers["Vary"] = "Origin"
    return response


async def access_log_middleware(request: Request, call_next):
    start_time = time.perf_counter()
    response = await call_next(request)
    process_time = time.perf_counter() - start_time
    response.headers["X-Process-Time"] = f"{process_time:.6f}"

    if process_time > SLOW_REQUEST_THRESHOLD:
        logger.warning(
            "Slow request: {} {} -> {} took {:.2f}s",
            request.method,
            request.url.path,
            response.status_code,
            process_time,
        )
    else:
        logger.info(
            "{} {} -> {} ({:.1f} ms)",
            request.method,
            request.url.path,
            response.status_code,
            process_time * 1000,
        )
    return response


def install_middleware(app: FastAPI) -> None:
    """The last middleware added runs first: CORS wraps the access log."""
    app.middleware("http")(access_log_middleware)
    app.middleware("http")(cors_middleware)
