import asyncio

import pytest
from fastmcp import Client
from starlette.testclient import TestClient

from agent.itinerary_agent import ItineraryGenerationError
from agent.prompt import build_itinerary_prompt
from tools import mcp_server

ITINERARY = "# Tokyo\n## Day 1\n- Senso-ji\nLunch at **Ichiran**."


@pytest.fixture
def fake_model(monkeypatch):
    """Replace the model call; records every trip it was asked about."""
    calls = []

    async def fake_generate_itinerary(trip):
        build_itinerary_prompt(trip)  # raises on bad dates, like the real one
        calls.append(trip)
        return ITINERARY

    monkeypatch.setattr(mcp_server, "generate_itinerary", fake_generate_itinerary)
    return calls


@pytest.fixture
def failing_model(monkeypatch):
    async def fake_generate_itinerary(trip):
        raise ItineraryGenerationError("The model returned an empty itinerary.")

    monkeypatch.setattr(mcp_server, "generate_itinerary", fake_generate_itinerary)


@pytest.fixture
def client():
    return TestClient(mcp_server.mcp.http_app())


def _payload(**overrides):
    payload = {
        "origin": "SFO",
        "destination": "Tokyo",
        "start": "2025-11-01",
        "end": "2025-11-04",
        "numPeople": "2",
        "activity": ["temples"],
        "food": ["ramen"],
    }
    payload.update(overrides)
    return payload


# -----------------------------------------------------------------------------
# POST /generate-itinerary
# -----------------------------------------------------------------------------
def test_generate_itinerary_success(client, fake_model):
    response = client.post("/generate-itinerary", json=_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["itinerary"] == ITINERARY
    assert body["itinerary_html"] == (
        "<h1>Tokyo</h1><h2>Day 1</h2><li>Senso-ji</li>"
        "<p>Lunch at <strong>Ichiran</strong>.</p>"
    )
    assert fake_model[0].destination == "Tokyo"
    assert fake_model[0].num_people == "2"


def test_generate_itinerary_missing_fields(client, fake_model):
    payload = _payload()
    del payload["destination"]
    del payload["start"]

    response = client.post("/generate-itinerary", json=payload)

    assert response.status_code == 400
    assert response.json() == {
        "error": "Missing required fields",
        "missing": ["destination", "start"],
    }
    assert fake_model == []


def test_generate_itinerary_bad_dates(client, fake_model):
    response = client.post("/generate-itinerary", json=_payload(end="soon"))

    assert response.status_code == 400
    assert "Invalid trip dates" in response.json()["error"]


def test_generate_itinerary_model_failure(client, failing_model):
    response = client.post("/generate-itinerary", json=_payload())

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to generate itinerary",
        "details": "The model returned an empty itinerary.",
    }


def test_generate_itinerary_rejects_non_json(client, fake_model):
    response = client.post(
        "/generate-itinerary",
        content=b"origin=SFO",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be JSON"}


def test_generate_itinerary_rejects_json_array(client, fake_model):
    response = client.post("/generate-itinerary", json=[_payload()])
    assert response.status_code == 400


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


# -----------------------------------------------------------------------------
# Shared pipeline (used by the plan_itinerary MCP tool)
# -----------------------------------------------------------------------------
def test_plan_from_payload_accepts_tool_arguments(fake_model):
    status, body = asyncio.run(mcp_server.plan_from_payload("plan_itinerary", {
        "origin": "SFO",
        "destination": "Tokyo",
        "start": "2025-11-01",
        "end": "2025-11-04",
        "num_people": "3",
        "activity": None,
        "food": ["sushi"],
    }))

    assert status == 200
    assert body["success"] is True
    assert fake_model[0].num_people == "3"
    assert fake_model[0].activity == []
    assert fake_model[0].food == ["sushi"]


def test_plan_from_payload_reports_errors_as_dicts(failing_model):
    status, body = asyncio.run(
        mcp_server.plan_from_payload("plan_itinerary", _payload())
    )
    assert status == 500
    assert body["error"] == "Failed to generate itinerary"


# -----------------------------------------------------------------------------
# Bad request bodies
# -----------------------------------------------------------------------------
def test_generate_itinerary_rejects_non_utf8_body(client, fake_model):
    response = client.post(
        "/generate-itinerary",
        content=b'{"origin": "\xff"}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be JSON"}
    assert fake_model == []


@pytest.mark.parametrize("value", [5, True, {"kind": "museums"}])
def test_generate_itinerary_rejects_bad_preference_type(client, fake_model, value):
    response = client.post("/generate-itinerary", json=_payload(activity=value))

    assert response.status_code == 400
    assert "activity must be a string or a list of strings" in response.json()["error"]
    assert fake_model == []


def test_generate_itinerary_route_only_accepts_post(client):
    assert client.get("/generate-itinerary").status_code == 405


# -----------------------------------------------------------------------------
# MCP tools, called through an in-memory FastMCP client
# -----------------------------------------------------------------------------
def _call_tool(name, arguments):
    async def call():
        async with Client(mcp_server.mcp) as mcp_client:
            return await mcp_client.call_tool(name, arguments)

    return asyncio.run(call())


def test_tools_are_listed():
    async def list_tools():
        async with Client(mcp_server.mcp) as mcp_client:
            return await mcp_client.list_tools()

    names = {tool.name for tool in asyncio.run(list_tools())}
    assert {"plan_itinerary", "render_itinerary_markup"} <= names


def test_render_itinerary_markup_tool():
    result = _call_tool("render_itinerary_markup", {"text": "## Day 1\n- Senso-ji"})

    assert result.is_error is False
    assert result.structured_content == {"html": "<h2>Day 1</h2><li>Senso-ji</li>"}


def test_plan_itinerary_tool_accepts_integer_travelers(fake_model):
    result = _call_tool("plan_itinerary", {
        "origin": "SFO",
        "destination": "Tokyo",
        "start": "2025-11-01",
        "end": "2025-11-04",
        "num_people": 2,
        "activity": ["temples"],
    })

    assert result.is_error is False
    assert result.structured_content["success"] is True
    assert result.structured_content["itinerary"] == ITINERARY
    assert fake_model[0].num_people == "2"
    assert fake_model[0].food == []


def test_plan_itinerary_tool_reports_missing_fields(fake_model):
    result = _call_tool("plan_itinerary", {
        "origin": "SFO",
        "destination": " ",
        "start": "2025-11-01",
        "end": "",
    })

    assert result.is_error is False
    assert result.structured_content == {
        "error": "Missing required fields",
        "missing": ["destination", "end"],
    }
    assert fake_model == []
