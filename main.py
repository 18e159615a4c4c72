# =============================================================================
# main.py  -  Interactive Entry Point for the Trip Itinerary Planner
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Asks for the trip details (the same fields as the web form)
#   2. Validates them (core/trip_request.py)
#   3. Shows the Loading view
#   4. Runs the ADK agent once (agent/itinerary_agent.py)
#   5. Renders the itinerary (core/formatting.py) into the Result view,
#      or shows the Error view if anything went wrong
#
# For the HTTP backend instead, run:  uv run python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load .env (ANTHROPIC_API_KEY, ITINERARY_MODEL, ...) before the agent is
# created; LiteLlm reads provider keys from the environment.
load_dotenv()

from agent.itinerary_agent import generate_itinerary
from core.formatting import render_itinerary
from core.models import ViewState
from core.page import render_view
from core.trip_request import MissingTripFieldsError, TripRequestError, parse_trip_request

QUIT_WORDS = ("quit", "exit", "q")

# (payload key, question)
_QUESTIONS = (
    ("origin", "Where are you traveling from?"),
    ("destination", "Where are you going?"),
    ("start", "Start date (YYYY-MM-DD)"),
    ("end", "End date (YYYY-MM-DD)"),
    ("numPeople", "Number of travelers"),
    ("activity", "Activities you enjoy (comma-separated)"),
    ("food", "Food preferences (comma-separated)"),
)


class QuitRequested(Exception):
    pass


def _ask(question: str) -> str:
    try:
        answer = input(f"  {question}: ").strip()
    except (EOFError, KeyboardInterrupt):
        raise QuitRequested() from None
    if answer.lower() in QUIT_WORDS:
        raise QuitRequested()
    return answer


def collect_trip_payload() -> dict:
    """Ask for every trip field and return the form-shaped payload."""
    payload = {}
    for key, question in _QUESTIONS:
        answer = _ask(question)
        if key in ("activity", "food"):
            payload[key] = [item.strip() for item in answer.split(",") if item.strip()]
        else:
            payload[key] = answer
    return payload


async def run_planner():
    """Collect trips from the terminal until the user quits."""
    print("=" * 70)
    print("  TRIP ITINERARY PLANNER")
    print("  Powered by Google ADK + LiteLlm")
    print("=" * 70)
    print("  (Type 'quit' at any prompt to exit)")

    while True:
        print("\n" + "-" * 70)
        try:
            payload = collect_trip_payload()
        except QuitRequested:
            print("\n👋 Goodbye!")
            break

        try:
            trip = parse_trip_request(payload)
        except MissingTripFieldsError as exc:
            print(f"\n⚠️  Missing required fields: {', '.join(exc.missing)}")
            continue

        print("\n" + render_view(ViewState.LOADING))

        try:
            itinerary = await generate_itinerary(trip)
        except TripRequestError as exc:
            print(f"\n⚠️  {exc}")
            continue
        except Exception as exc:
            print(f"\nError: {exc}")
            print(render_view(ViewState.ERROR))
            continue

        print("\n" + render_view(ViewState.RESULT, render_itinerary(itinerary)))
        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_planner())
