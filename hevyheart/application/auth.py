from __future__ import annotations

import asyncio
import logging
import webbrowser
from typing import Callable, Optional, Tuple

from ..auth.callback_server import RedirectCaptureServer
from ..hevy.application.ports import HevyAuthError, HevyClientPort
from ..models.hevy import HevyAccount
from ..models.strava import StravaTokenResponse
from ..settings import Settings
from ..strava.application.ports import StravaClientPort

logger = logging.getLogger(__name__)

BrowserOpener = Callable[[str], bool]
Credentials = Tuple[str, str]


async def authorize_strava(
    client: StravaClientPort,
    server: RedirectCaptureServer,
    open_browser: BrowserOpener = webbrowser.open,
    on_browser_unavailable: Optional[Callable[[str], None]] = None,
) -> StravaTokenResponse:
    """Run the authorization-code flow through the local redirect listener.

    The listener is always stopped, whether the code arrives, the redirect
    fails, or the token exchange is rejected.
    """

    url = client.authorization_url()
    pending = asyncio.ensure_future(server.start_and_await())
    try:
        # Let the listener bind before the browser is pointed at it.
        await asyncio.sleep(0)
        try:
            opened = open_browser(url)
        except webbrowser.Error:
            logger.exception("Could not launch a browser for Strava authorization")
            opened = False
        if not opened and on_browser_unavailable is not None:
            on_browser_unavailable(url)

        code = await pending
        return await client.exchange_code(code)
    finally:
        server.stop()
        if not pending.done():
            await asyncio.gather(pending, return_exceptions=True)


async def authenticate_hevy(
    client: HevyClientPort,
    settings: Settings,
    credentials: Optional[Credentials] = None,
) -> Optional[HevyAccount]:
    """Make sure the Hevy client can call the V2 API.

    A configured auth token wins; otherwise the configured credentials, then
    the explicitly supplied ones, are used to log in.
    """

    if client.is_authenticated:
        logger.info("Using configured Hevy auth token")
        return None

    if settings.has_hevy_credentials:
        credentials = (settings.hevy_email_or_username, settings.hevy_password)

    if credentials is None:
        raise HevyAuthError("No Hevy auth token or credentials available")

    return await client.login(*credentials)


__all__ = ["authorize_strava", "authenticate_hevy"]
