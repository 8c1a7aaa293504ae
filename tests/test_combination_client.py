"""Tests for the HTTP combination bridge."""
import httpx
import pytest
from httpx import ASGITransport

from prompt_studio.clients.combination_client import CombinationClient
from prompt_studio.composition import CompositionState
from prompt_studio.exceptions import CombinationSaveError, CombinationStorageError, SaveFailureReason
from prompt_studio.main import app


def mock_client(handler) -> CombinationClient:
    return CombinationClient("http://studio.test", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_create_combination_against_app(app_library):
    """Client round trip through the real API."""
    async with CombinationClient("http://test", transport=ASGITransport(app=app)) as client:
        combination = await client.create_combination("Via HTTP", [4, 2], [0, 1])

    assert combination.id == 1
    assert combination.prompt_ids == [4, 2]
    assert combination.created_at is not None
    assert app_library.combinations.get_by_id(1).name == "Via HTTP"


@pytest.mark.asyncio
async def test_list_combinations_against_app(app_library):
    async with CombinationClient("http://test", transport=ASGITransport(app=app)) as client:
        await client.create_combination("First", [1], [0])
        combinations = await client.list_combinations()

    assert [combination.name for combination in combinations] == ["First"]


@pytest.mark.asyncio
async def test_create_combination_sends_camel_case_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.read()
        return httpx.Response(201, json={
            "id": 3,
            "name": "Shaped",
            "promptIds": [5],
            "order": [0],
            "createdAt": "2025-01-01T00:00:00Z",
        })

    async with mock_client(handler) as client:
        combination = await client.create_combination("Shaped", [5], [0])

    assert seen["url"] == "http://studio.test/api/combinations"
    assert b'"promptIds":[5]' in seen["body"].replace(b" ", b"")
    assert combination.id == 3


@pytest.mark.asyncio
async def test_error_response_carries_server_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "Validation error: name too short", "errors": []})

    async with mock_client(handler) as client:
        with pytest.raises(CombinationStorageError) as exc_info:
            await client.create_combination("x", [1], [0])

    assert exc_info.value.message == "Validation error: name too short"
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_error_response_without_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad gateway")

    async with mock_client(handler) as client:
        with pytest.raises(CombinationStorageError) as exc_info:
            await client.create_combination("x", [1], [0])

    assert exc_info.value.message == "HTTP 502"


@pytest.mark.asyncio
async def test_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(handler) as client:
        with pytest.raises(CombinationStorageError) as exc_info:
            await client.create_combination("x", [1], [0])

    assert "Storage unreachable" in exc_info.value.message
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_composition_save_surfaces_server_message(prompt_a):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "Failed to create combination"})

    async with mock_client(handler) as client:
        state = CompositionState(bridge=client)
        state.add(prompt_a)

        with pytest.raises(CombinationSaveError) as exc_info:
            await state.save_as("Server down")

    assert exc_info.value.reason is SaveFailureReason.STORAGE
    assert "Failed to create combination" in exc_info.value.message
    assert len(state) == 1


@pytest.mark.asyncio
async def test_composition_save_over_http(app_library, prompt_a, prompt_b):
    async with CombinationClient("http://test", transport=ASGITransport(app=app)) as client:
        state = CompositionState(bridge=client)
        state.add(prompt_a)
        state.add(prompt_b)
        state.move(1, 0)

        combination = await state.save_as("Over the wire")

    stored = app_library.combinations.get_by_id(combination.id)
    assert stored.prompt_ids == [2, 1]
    assert stored.order == [0, 1]
