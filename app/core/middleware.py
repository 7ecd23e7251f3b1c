import json
import logging
import time
from fastapi import FastAPI, Request
from app.core.config import settings

logger = logging.getLogger("app.requests")

HIDDEN_FIELDS = ("password", "token", "accessToken", "refreshToken")
LOGGED_HEADERS = ("content-type", "authorization", "x-forwarded-for", "referer")

class RequestStats:
    def __init__(self):
        self.total_requests = 0
        self.total_errors = 0

    def record(self, status_code: int):
        self.total_requests += 1
        if status_code >= 400:
            self.total_errors += 1

    def reset(self):
        self.total_requests = 0
        self.total_errors = 0

    def snapshot(self) -> dict:
        if self.total_requests:
            error_rate = f"{self.total_errors / self.total_requests * 100:.2f}%"
        else:
            error_rate = "0%"
        return {
            "totalRequests": self.total_requests,
            "totalErrors": self.total_errors,
            "errorRate": error_rate
        }

request_stats = RequestStats()

def mask_header(name: str, value: str) -> str:
    if name == "authorization" and value.startswith("Bearer "):
        return f"Bearer {value[7:15]}..."
    return value

def hide_fields(body):
    if not isinstance(body, dict):
        return body
    return {k: "[HIDDEN]" if k in HIDDEN_FIELDS and v else v for k, v in body.items()}

def format_bytes(size: int) -> str:
    if size == 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    i = 0
    value = float(size)
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    return f"{round(value, 2):g} {units[i]}"

async def _log_request_details(request: Request):
    client = request.client.host if request.client else "Unknown"
    user_agent = request.headers.get("user-agent", "Unknown")
    if len(user_agent) > 100:
        user_agent = user_agent[:100] + "..."

    logger.info("   IP: %s", client)
    logger.info("   User-Agent: %s", user_agent)

    for header in LOGGED_HEADERS:
        value = request.headers.get(header)
        if value:
            logger.info("   %s: %s", header, mask_header(header, value))

    if request.method in ("POST", "PUT", "PATCH"):
        raw = await request.body()
        if raw:
            try:
                body = json.loads(raw)
            except ValueError:
                body = None
            if body:
                logger.info("   Body: %s", json.dumps(hide_fields(body), indent=2))

    if request.query_params:
        logger.info("   Query: %s", dict(request.query_params))

def register_middleware(app: FastAPI):

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        if settings.DISABLE_LOGGING:
            return await call_next(request)

        detailed = settings.detailed_logging
        logger.info("--> %s %s", request.method, request.url.path)
        if detailed:
            await _log_request_details(request)

        start = time.perf_counter()
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000

        logger.info("<-- %s %s %s (%.0fms)", request.method, request.url.path, response.status_code, duration)
        if detailed:
            content_length = response.headers.get("content-length")
            if content_length:
                logger.info("   Response Size: %s", format_bytes(int(content_length)))
        return response

    # added last so it wraps the logger and sees every response
    @app.middleware("http")
    async def count_requests(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            request_stats.record(500)
            raise
        request_stats.record(response.status_code)
        return response
