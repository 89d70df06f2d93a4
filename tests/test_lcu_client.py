import json

import httpx
import pytest

from infrastructure.api import LCUClient
from tests.fakes import BASE_URL


def _client(handler) -> LCUClient:
    return LCUClient(BASE_URL, transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_get_returns_parsed_json_and_sends_no_body():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[{"id": "cs-1", "type": "championSelect"}])

    async with _client(handler) as lcu:
        result = await lcu.get_conversations()

    assert result == [{"id": "cs-1", "type": "championSelect"}]
    assert seen[0].method == "GET"
    assert seen[0].content == b""
    assert seen[0].headers["accept"] == "application/json"
    assert seen[0].headers["content-type"] == "application/json"


@pytest.mark.anyio
async def test_post_serialises_payload_as_json():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": "m1"})

    async with _client(handler) as lcu:
        result = await lcu.post_conversation_message("cs-1", "Ahri - G3")

    assert result == {"id": "m1"}
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/lol-chat/v1/conversations/cs-1/messages"
    assert json.loads(seen[0].content) == {"body": "Ahri - G3", "type": "celebration"}


@pytest.mark.anyio
@pytest.mark.parametrize("status", [400, 404, 500, 503])
async def test_non_success_status_is_failure(status):
    def handler(request):
        return httpx.Response(status, json={"message": "nope"})

    async with _client(handler) as lcu:
        assert await lcu.request("GET", "/lol-gameflow/v1/gameflow-phase") is None


@pytest.mark.anyio
async def test_transport_error_is_failure():
    def handler(request):
        raise httpx.ConnectError("client not running", request=request)

    async with _client(handler) as lcu:
        assert await lcu.get_region_locale() is None


@pytest.mark.anyio
async def test_non_json_body_is_failure():
    def handler(request):
        return httpx.Response(200, text="<html>not json</html>")

    async with _client(handler) as lcu:
        assert await lcu.get_chat_participants() is None


@pytest.mark.anyio
async def test_request_outside_context_is_a_programming_error():
    lcu = _client(lambda request: httpx.Response(200, json={}))
    with pytest.raises(RuntimeError):
        await lcu.get_ranked_stats("p1")
