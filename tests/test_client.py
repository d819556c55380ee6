import httpx
import pytest

from tavus_mcp.client import TavusAPIError, TavusClient
from tavus_mcp.config import TavusSettings


@pytest.mark.asyncio
async def test_requests_carry_api_key_and_json_content_type(client, fake_tavus):
    await client.get("/replicas")

    request = fake_tavus.last
    assert request.headers["x-api-key"] == "test-key"
    assert request.headers["content-type"] == "application/json"
    assert str(request.url) == "https://tavusapi.test/v2/replicas"


def test_client_uses_configured_timeout():
    client = TavusClient(TavusSettings(api_key="k", timeout=12))

    assert client.client.timeout.read == 12


@pytest.mark.asyncio
async def test_empty_body_decodes_to_none(client, fake_tavus):
    fake_tavus.respond("DELETE", "/videos/v_1", status_code=204)

    assert await client.delete("/videos/v_1") is None


@pytest.mark.asyncio
async def test_non_json_body_returned_as_text(client, fake_tavus):
    fake_tavus.respond("GET", "/speech", content=b"plain words")

    assert await client.get("/speech") == "plain words"


@pytest.mark.asyncio
async def test_error_field_preferred(client, fake_tavus):
    fake_tavus.respond("POST", "/replicas", status_code=400, json={"error": "train_video_url is invalid"})

    with pytest.raises(TavusAPIError) as exc_info:
        await client.post("/replicas", json={})

    assert exc_info.value.message == "train_video_url is invalid"
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_message_field_used_when_no_error_field(client, fake_tavus):
    fake_tavus.respond("PATCH", "/personas/p_1", status_code=422, json={"message": "bad patch"})

    with pytest.raises(TavusAPIError) as exc_info:
        await client.patch("/personas/p_1", json=[])

    assert exc_info.value.message == "bad patch"


@pytest.mark.asyncio
async def test_transport_error_has_no_status(client, fake_tavus):
    fake_tavus.fail_with(httpx.ReadTimeout, "timed out")

    with pytest.raises(TavusAPIError) as exc_info:
        await client.get("/videos")

    assert exc_info.value.message == "timed out"
    assert exc_info.value.status_code is None
