"""
Logging helpers.

- configure_logging(): root logger format/level from settings.LOG_LEVEL.
- log_request / log_response: httpx event hooks for the contacts API client
  (method, URL, status, latency and optionally bodies).
- request_logging_middleware: dev-server middleware that adds an X-Request-ID
  header (UUID4) and logs method, path, status, latency and request-id.
"""
import logging
import time
import uuid
from typing import Callable

import httpx
from starlette.requests import Request

from config.settings import settings

logger = logging.getLogger("contacts.http")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)


# ---------------- HTTP client hooks ----------------

async def log_request(request: httpx.Request) -> None:
    request.extensions["started_at"] = time.perf_counter()
    if settings.HTTP_LOG_BODIES and request.content:
        logger.info("--> %s %s %s", request.method, request.url, request.content.decode("utf-8", "replace"))
    else:
        logger.info("--> %s %s", request.method, request.url)


async def log_response(response: httpx.Response) -> None:
    request = response.request
    started = request.extensions.get("started_at")
    latency = (time.perf_counter() - started) * 1000.0 if started is not None else 0.0
    if settings.HTTP_LOG_BODIES:
        await response.aread()
        logger.info(
            "<-- %s %s %s (%.2f ms) %s",
            response.status_code, request.method, request.url, latency, response.text,
        )
    else:
        logger.info("<-- %s %s %s (%.2f ms)", response.status_code, request.method, request.url, latency)


def http_event_hooks() -> dict:
    return {"request": [log_request], "response": [log_response]}


# ---------------- Server middleware ----------------

async def request_logging_middleware(request: Request, call_next: Callable):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    response = await call_next(request)
    latency = (time.time() - start) * 1000.0
    response.headers["X-Request-ID"] = request_id
    logging.getLogger("contacts.server").info(
        "[request] id=%s method=%s path=%s status=%s latency_ms=%.2f",
        request_id, request.method, request.url.path, response.status_code, latency,
    )
    return response
