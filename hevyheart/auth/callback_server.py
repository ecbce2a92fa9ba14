"""Single-use loopback listener that captures an OAuth redirect."""

from __future__ import annotations

import asyncio
import logging
import socket
from typing import Optional
from urllib.parse import urlsplit

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

logger = logging.getLogger(__name__)

SUCCESS_PAGE = """
<html>
    <body>
        <h1>Authorization Successful!</h1>
        <p>You can close this window and return to the application.</p>
        <script>window.close();</script>
    </body>
</html>
"""

FAILURE_PAGE = """
<html>
    <body>
        <h1>Authorization Failed</h1>
        <p>No authorization code received.</p>
    </body>
</html>
"""


class AuthorizationFailed(RuntimeError):
    """Raised when the redirect arrives without a usable authorization code."""


class AuthorizationCancelled(AuthorizationFailed):
    """Raised when the listener is stopped before any redirect arrived."""


def extract_authorization_code(query: str) -> Optional[str]:
    """Return the raw value of the first ``code=`` parameter in ``query``.

    No percent-decoding is applied.
    """
    if not query:
        return None

    for param in query.lstrip("?").split("&"):
        if param.startswith("code="):
            return param.partition("=")[2] or None
    return None


class RedirectCaptureServer:
    """Serve ``redirect_uri`` until one authorization redirect is captured."""

    def __init__(self, redirect_uri: str, *, callback_path: Optional[str] = None) -> None:
        parsed = urlsplit(redirect_uri)
        self._redirect_uri = redirect_uri
        self._host = parsed.hostname or "localhost"
        self._port = parsed.port if parsed.port is not None else 80
        self._path = callback_path or parsed.path.rstrip("/") or "/callback"
        self._socket: Optional[socket.socket] = None
        self._bound_port: Optional[int] = None
        self._server: Optional[uvicorn.Server] = None
        self._result: Optional[asyncio.Future[str]] = None
        self._stopped = False

    @property
    def callback_path(self) -> str:
        return self._path

    @property
    def port(self) -> int:
        """Bound port, which differs from the configured one when that is 0."""
        return self._bound_port if self._bound_port is not None else self._port

    @property
    def started(self) -> bool:
        return self._server is not None and self._server.started

    async def start_and_await(self) -> str:
        """Listen until a redirect completes the wait or :meth:`stop` is called."""
        if self._result is not None:
            raise RuntimeError("RedirectCaptureServer is single-use")
        loop = asyncio.get_running_loop()
        self._result = loop.create_future()
        if self._stopped:
            raise AuthorizationCancelled("Callback server stopped before start")

        self._socket = socket.create_server((self._host, self._port))
        self._bound_port = self._socket.getsockname()[1]
        config = uvicorn.Config(
            self._build_app(),
            log_config=None,
            access_log=False,
            lifespan="off",
        )
        self._server = uvicorn.Server(config)
        # stop() may have run while the server was being built.
        if self._stopped:
            self._server.should_exit = True
        serve_task = asyncio.create_task(self._server.serve(sockets=[self._socket]))
        logger.info("Callback server started at %s", self._redirect_uri)

        try:
            await asyncio.wait(
                {self._result, serve_task}, return_when=asyncio.FIRST_COMPLETED
            )
            if self._result.done():
                return self._result.result()
            if (
                serve_task.done()
                and not serve_task.cancelled()
                and serve_task.exception() is not None
            ):
                raise serve_task.exception()
            raise AuthorizationCancelled("Callback server stopped before a redirect arrived")
        finally:
            self.stop()
            await asyncio.gather(serve_task, return_exceptions=True)
            self._socket.close()
            logger.debug("Callback server on port %s closed", self._bound_port)

    def stop(self) -> None:
        """Stop listening. Safe to call repeatedly and before or after start."""
        self._stopped = True
        if self._server is not None:
            self._server.should_exit = True

    def _complete(self, code: Optional[str]) -> None:
        if self._result is None or self._result.done():
            logger.warning("Ignoring callback received after completion")
            return
        if code:
            self._result.set_result(code)
        else:
            self._result.set_exception(
                AuthorizationFailed("No authorization code received")
            )
        self.stop()

    def _build_app(self) -> FastAPI:
        app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

        @app.get(self._path, response_class=HTMLResponse, include_in_schema=False)
        async def callback(request: Request) -> HTMLResponse:
            code = extract_authorization_code(request.url.query)
            if code:
                logger.info("Authorization code received")
                body = SUCCESS_PAGE
            else:
                logger.warning("Callback received without an authorization code")
                body = FAILURE_PAGE
            self._complete(code)
            return HTMLResponse(body)

        return app


__all__ = [
    "AuthorizationCancelled",
    "AuthorizationFailed",
    "RedirectCaptureServer",
    "extract_authorization_code",
]
