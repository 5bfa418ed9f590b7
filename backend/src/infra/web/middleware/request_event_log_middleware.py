import logging
from time import perf_counter
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars
from structlog.stdlib import BoundLogger
from starlette.types import ASGIApp, Message, Receive, Scope, Send

request_logger = structlog.stdlib.get_logger("infra.web.request")
fallback_logger = logging.getLogger(__name__)


class RequestEventLogMiddleware:
    def __init__(
        self,
        app: ASGIApp,
        *,
        request_id_header: str = "x-request-id",
        excluded_path_suffixes: set[str] | None = None,
    ) -> None:
        self.app = app
        self.request_id_header = request_id_header.lower()
        self.excluded_path_suffixes = excluded_path_suffixes or set()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = str(scope.get("path", ""))
        if any(path.endswith(suffix) for suffix in self.excluded_path_suffixes):
            await self.app(scope, receive, send)
            return

        started_at = perf_counter()
        method = str(scope.get("method", ""))
        request_id = self._extract_header(scope, self.request_id_header) or str(uuid4())
        response_status_code: int | None = None

        bind_contextvars(request_id=request_id, http_method=method, http_path=path)

        async def send_wrapper(message: Message) -> None:
            nonlocal response_status_code

            if message["type"] == "http.response.start":
                response_status_code = int(message.get("status", 200))

                header_key = self.request_id_header.encode("latin-1")
                headers = [item for item in message.get("headers", []) if item[0].lower() != header_key]
                headers.append((header_key, request_id.encode("latin-1")))

                message = {**message, "headers": headers}

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as error:
            self._log_summary(
                logger=request_logger,
                status_code=response_status_code or 500,
                had_exception=True,
                payload={
                    "request_id": request_id,
                    "method": method,
                    "path": path,
                    "route_path": self._resolve_route_path(scope),
                    "duration_ms": self._elapsed_ms(started_at),
                    "error_class": error.__class__.__name__,
                    "error_message": str(error),
                },
            )
            raise
        else:
            status_code = response_status_code or 200

            self._log_summary(
                logger=request_logger,
                status_code=status_code,
                had_exception=False,
                payload={
                    "request_id": request_id,
                    "method": method,
                    "path": path,
                    "route_path": self._resolve_route_path(scope),
                    "duration_ms": self._elapsed_ms(started_at),
                },
            )
        finally:
            clear_contextvars()

    def _extract_header(self, scope: Scope, header_name: str) -> str | None:
        lookup = header_name.lower()

        for raw_key, raw_value in scope.get("headers", []):
            if raw_key.decode("latin-1").lower() == lookup:
                return raw_value.decode("latin-1")

        return None

    def _resolve_route_path(self, scope: Scope) -> str | None:
        route = scope.get("route")

        return getattr(route, "path", None) if route is not None else None

    def _elapsed_ms(self, started_at: float) -> float:
        return round((perf_counter() - started_at) * 1000, 3)

    def _log_summary(
        self,
        *,
        logger: BoundLogger,
        status_code: int,
        had_exception: bool,
        payload: dict[str, object],
    ) -> None:
        payload = {**payload, "status_code": status_code}

        try:
            if had_exception:
                logger.exception("http_request_summary", **payload)
            elif status_code >= 500:
                logger.error("http_request_summary", **payload)
            elif status_code >= 400:
                logger.warning("http_request_summary", **payload)
            else:
                logger.info("http_request_summary", **payload)
        except Exception:
            fallback_logger.exception("Failed to emit request summary log")
