"""Authentication use cases for Strava and Hevy."""

from __future__ import annotations

import asyncio
from typing import List

import httpx
import pytest

from hevyheart.application import authenticate_hevy, authorize_strava
from hevyheart.auth import AuthorizationFailed, RedirectCaptureServer
from hevyheart.hevy.application.ports import HevyAuthError
from hevyheart.strava.application.ports import StravaAuthError

from tests.conftest import HevyFake, StravaFake, make_settings


class BrowserStub:
    """Plays the user's browser by hitting the redirect once the listener is up."""

    def __init__(self, server: RedirectCaptureServer, query: str, opened: bool = True) -> None:
        self.server = server
        self.query = query
        self.opened = opened
        self.urls: List[str] = []
        self.redirect: asyncio.Task | None = None

    def __call__(self, url: str) -> bool:
        self.urls.append(url)
        self.redirect = asyncio.ensure_future(self._follow_redirect())
        return self.opened

    async def _follow_redirect(self) -> httpx.Response:
        for _ in range(200):
            if self.server.started:
                break
            await asyncio.sleep(0.01)
        async with httpx.AsyncClient(trust_env=False) as client:
            return await client.get(
                f"http://127.0.0.1:{self.server.port}/callback{self.query}"
            )


@pytest.mark.asyncio
async def test_authorize_strava_exchanges_the_captured_code() -> None:
    strava = StravaFake()
    server = RedirectCaptureServer("http://127.0.0.1:0/callback")
    browser = BrowserStub(server, "?state=&code=abc123&scope=read")

    token = await authorize_strava(strava, server, open_browser=browser)

    assert token.access_token == "strava-access"
    assert strava.exchanged_codes == ["abc123"]
    assert browser.urls == [strava.authorization_url()]
    assert (await browser.redirect).status_code == 200


@pytest.mark.asyncio
async def test_authorize_strava_reports_unopened_browser() -> None:
    server = RedirectCaptureServer("http://127.0.0.1:0/callback")
    browser = BrowserStub(server, "?code=xyz", opened=False)
    shown: List[str] = []

    await authorize_strava(
        StravaFake(), server, open_browser=browser, on_browser_unavailable=shown.append
    )

    assert shown == browser.urls
    await browser.redirect


@pytest.mark.asyncio
async def test_authorize_strava_propagates_denied_redirect() -> None:
    strava = StravaFake()
    server = RedirectCaptureServer("http://127.0.0.1:0/callback")
    browser = BrowserStub(server, "?error=access_denied")

    with pytest.raises(AuthorizationFailed):
        await authorize_strava(strava, server, open_browser=browser)

    assert strava.exchanged_codes == []
    await browser.redirect


@pytest.mark.asyncio
async def test_authorize_strava_propagates_exchange_failure() -> None:
    strava = StravaFake()
    strava.exchange_error = StravaAuthError("rejected")
    server = RedirectCaptureServer("http://127.0.0.1:0/callback")
    browser = BrowserStub(server, "?code=abc")

    with pytest.raises(StravaAuthError):
        await authorize_strava(strava, server, open_browser=browser)
    await browser.redirect


@pytest.mark.asyncio
async def test_authenticate_hevy_prefers_configured_token() -> None:
    hevy = HevyFake(authenticated=True)

    account = await authenticate_hevy(
        hevy, make_settings(hevy_auth_token="token"), ("user", "pw")
    )

    assert account is None
    assert hevy.logins == []


@pytest.mark.asyncio
async def test_authenticate_hevy_uses_configured_credentials() -> None:
    hevy = HevyFake()
    settings = make_settings(hevy_email_or_username="cfg", hevy_password="secret")

    account = await authenticate_hevy(hevy, settings, ("prompted", "pw"))

    assert account is not None and account.username == "cfg"
    assert hevy.logins == [("cfg", "secret")]


@pytest.mark.asyncio
async def test_authenticate_hevy_falls_back_to_supplied_credentials() -> None:
    hevy = HevyFake()

    await authenticate_hevy(hevy, make_settings(), ("prompted", "pw"))

    assert hevy.logins == [("prompted", "pw")]


@pytest.mark.asyncio
async def test_authenticate_hevy_without_anything_fails() -> None:
    with pytest.raises(HevyAuthError):
        await authenticate_hevy(HevyFake(), make_settings())
