"""
Tests for UmlautAdaptarrClient - original title lookup.

Uses respx to mock GET /titlelookup and verifies:
- 404 means the title was not changed
- 200 returns originalTitle
- Other statuses, network errors and invalid JSON raise TitleLookupError
"""

import httpx
import pytest
import pytest_asyncio
import respx

from crowdclient.adapters.api.umlautadaptarr_client import UmlautAdaptarrClient
from crowdclient.core.exceptions import TitleLookupError
from crowdclient.core.ports.api_clients import ITitleLookup

BASE_URL = "http://umlautadaptarr.test:5005"
LOOKUP_URL = f"{BASE_URL}/titlelookup"
CHANGED = "Der.Baer.S01E01.German.1080p.WEB.h264-GRP"
ORIGINAL = "Der.Bär.S01E01.German.1080p.WEB.h264-GRP"


@pytest_asyncio.fixture
async def client():
    client = UmlautAdaptarrClient(base_url=f"{BASE_URL}/")
    yield client
    await client.close()


def test_implements_interface() -> None:
    assert isinstance(UmlautAdaptarrClient(), ITitleLookup)


def test_empty_base_url_uses_default() -> None:
    assert UmlautAdaptarrClient(base_url="")._base_url == "http://localhost:5005"


class TestLookupOriginalTitle:
    @pytest.mark.asyncio
    @respx.mock
    async def test_unchanged_title(self, client: UmlautAdaptarrClient) -> None:
        respx.get(LOOKUP_URL).mock(return_value=httpx.Response(404))

        assert await client.lookup_original_title(CHANGED) is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_original_title_returned(self, client: UmlautAdaptarrClient) -> None:
        route = respx.get(LOOKUP_URL).mock(
            return_value=httpx.Response(
                200, json={"changedTitle": CHANGED, "originalTitle": ORIGINAL}
            )
        )

        assert await client.lookup_original_title(CHANGED) == ORIGINAL
        assert route.calls[0].request.url.params["changedTitle"] == CHANGED

    @pytest.mark.asyncio
    @respx.mock
    async def test_name_is_query_encoded(self, client: UmlautAdaptarrClient) -> None:
        route = respx.get(LOOKUP_URL).mock(return_value=httpx.Response(404))

        await client.lookup_original_title("Show & Co S01 #1")

        request = route.calls[0].request
        assert request.url.params["changedTitle"] == "Show & Co S01 #1"
        assert b"&" not in request.url.query.split(b"=", 1)[1]

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_original_title_means_unchanged(self, client: UmlautAdaptarrClient) -> None:
        respx.get(LOOKUP_URL).mock(return_value=httpx.Response(200, json={"originalTitle": ""}))

        assert await client.lookup_original_title(CHANGED) is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error(self, client: UmlautAdaptarrClient) -> None:
        respx.get(LOOKUP_URL).mock(return_value=httpx.Response(500, text="boom"))

        with pytest.raises(TitleLookupError, match="500"):
            await client.lookup_original_title(CHANGED)

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_refused(self, client: UmlautAdaptarrClient) -> None:
        respx.get(LOOKUP_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(TitleLookupError, match="umlautadaptarr.test"):
            await client.lookup_original_title(CHANGED)

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_json(self, client: UmlautAdaptarrClient) -> None:
        respx.get(LOOKUP_URL).mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(TitleLookupError):
            await client.lookup_original_title(CHANGED)
