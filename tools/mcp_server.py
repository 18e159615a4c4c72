# =============================================================================
# tools/mcp_server.py  -  FastMCP Server (MCP tools + HTTP endpoint)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the planner two ways from one FastMCP server:
#
#     MCP tools
#       plan_itinerary           trip fields -> itinerary text + HTML
#       render_itinerary_markup  markdown text -> HTML
#
#     HTTP routes (FastMCP custom routes, Starlette underneath)
#       POST /generate-itinerary  JSON form payload -> JSON itinerary
#       GET  /health              liveness check
#
#   Each entry point is a thin wrapper: validation lives in
#   core/trip_request.py, rendering in core/formatting.py, the model call
#   in agent/itinerary_agent.py.
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server            HTTP on HOST:PORT (default :3000)
#   python -m tools.mcp_server --stdio    MCP over stdin/stdout
# =============================================================================

import json
import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from agent.itinerary_agent import generate_itinerary
from core.config import load_settings
from core.formatting import render_itinerary
from core.trip_request import (
    MissingTripFieldsError,
    TripRequestError,
    parse_trip_request,
)

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR.  In --stdio mode STDOUT carries the MCP JSON stream,
# and a stray log line there would corrupt it.
#
#   CYAN    incoming requests (tool / route + parameters)
#   GREEN   responses
#   YELLOW  intermediate status
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

# Responses carry whole itineraries; keep log lines readable.
_MAX_LOGGED_CHARS = 300


def _log_request(name: str, **params) -> None:
    """Log an incoming call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(name: str, result: dict) -> dict:
    """Log the response as compact (truncated) JSON in GREEN, then return it."""
    text = json.dumps(result, separators=(",", ":"))
    if len(text) > _MAX_LOGGED_CHARS:
        text = text[:_MAX_LOGGED_CHARS] + "..."
    logger.info(f"{_GREEN}  ← {name} response: {text}{_RESET}")
    return result


mcp = FastMCP("trip-itinerary-planner")


# =============================================================================
# Shared pipeline
# =============================================================================
async def plan_from_payload(name: str, payload: dict) -> tuple[int, dict]:
    """Validate ``payload``, generate and render an itinerary.

    Returns an HTTP-style status code and the response body, so the MCP
    tool and the HTTP route report failures the same way.
    """
    try:
        trip = parse_trip_request(payload)
        itinerary = await generate_itinerary(trip)
    except MissingTripFieldsError as exc:
        _log_status(f"Missing fields: {exc.missing}")
        return 400, _log_response(name, {
            "error": str(exc),
            "missing": exc.missing,
        })
    except TripRequestError as exc:
        _log_status(f"Invalid request: {exc}")
        return 400, _log_response(name, {"error": str(exc)})
    except Exception as exc:
        logger.exception("Error generating itinerary")
        return 500, _log_response(name, {
            "error": "Failed to generate itinerary",
            "details": str(exc),
        })

    _log_status(f"Itinerary generated ({len(itinerary)} characters)")
    return 200, _log_response(name, {
        "success": True,
        "itinerary": itinerary,
        "itinerary_html": render_itinerary(itinerary),
    })


# =============================================================================
# TOOL 1: plan_itinerary
# =============================================================================
@mcp.tool()
async def plan_itinerary(
    origin: str,
    destination: str,
    start: str,
    end: str,
    num_people: int | str = 1,
    activity: list[str] | None = None,
    food: list[str] | None = None,
) -> dict:
    """Generate a personalized day-by-day travel itinerary.

    Args:
        origin: Where the travelers leave from (e.g., "San Francisco").
        destination: Where they are going (e.g., "Tokyo").
        start: Trip start date in ISO format (e.g., "2025-11-01").
        end: Trip end date in ISO format (e.g., "2025-11-08").
        num_people: Number of travelers.
        activity: Preferred activities (e.g., ["museums", "hiking"]).
        food: Food preferences (e.g., ["street food", "vegetarian"]).

    Returns:
        A dict with:
          - success: True when an itinerary was generated
          - itinerary: The itinerary as markdown text
          - itinerary_html: The same itinerary rendered to HTML fragments
        or, on failure, a dict with "error" (and "missing" / "details").
    """
    _log_request("plan_itinerary",
                 origin=origin, destination=destination,
                 start=start, end=end, num_people=num_people,
                 activity=activity, food=food)

    _, body = await plan_from_payload("plan_itinerary", {
        "origin": origin,
        "destination": destination,
        "start": start,
        "end": end,
        "num_people": num_people,
        "activity": activity,
        "food": food,
    })
    return body


# =============================================================================
# TOOL 2: render_itinerary_markup
# =============================================================================
@mcp.tool()
def render_itinerary_markup(text: str) -> dict:
    """Render itinerary markdown to HTML fragments.

    Headings, whole-line bold sub-headers, "- " bullets, "---" separators
    and inline **bold** are converted.  List items are NOT wrapped in a
    <ul>; add one around the output if needed.

    Args:
        text: Itinerary markdown.

    Returns:
        A dict with "html": the rendered markup.
    """
    _log_request("render_itinerary_markup", chars=len(text))
    return _log_response("render_itinerary_markup", {"html": render_itinerary(text)})


# =============================================================================
# HTTP routes
# =============================================================================
@mcp.custom_route("/generate-itinerary", methods=["POST"])
async def generate_itinerary_endpoint(request: Request) -> JSONResponse:
    """POST /generate-itinerary - the results page's backend call."""
    try:
        payload = await request.json()
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError both land here.
        _log_status("Request body is not valid JSON")
        return JSONResponse({"error": "Request body must be JSON"}, status_code=400)

    if not isinstance(payload, dict):
        return JSONResponse({"error": "Request body must be a JSON object"}, status_code=400)

    _log_request("POST /generate-itinerary", payload=payload)
    status_code, body = await plan_from_payload("POST /generate-itinerary", payload)
    return JSONResponse(body, status_code=status_code)


@mcp.custom_route("/health", methods=["GET"])
async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    load_dotenv()

    settings = load_settings()
    if "--stdio" in sys.argv[1:]:
        mcp.run()
    else:
        logger.info(f"Server is running on http://{settings.host}:{settings.port}")
        mcp.run(transport="http", host=settings.host, port=settings.port)
