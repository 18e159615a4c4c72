# =============================================================================
# agent/itinerary_agent.py  -  Google ADK Agent for Itinerary Generation
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the ADK agent that writes itineraries, and runs it once per
#   trip request.
#
# ADK + LiteLlm:
#   Google ADK is the agent framework (runner, sessions, events).  The LLM
#   behind it is reached through ADK's LiteLlm adapter, so the model is a
#   plain string:
#     "anthropic/claude-sonnet-4-5-20250929"   (default, ANTHROPIC_API_KEY)
#     "openrouter/openai/gpt-4o"                (OPENROUTER_API_KEY)
#   Change it with ITINERARY_MODEL in .env.  Nothing else changes.
#
# ONE-SHOT RUNS:
#   Every call to generate_itinerary() gets a fresh in-memory session.
#   There is no conversation history between trips.
#
#   ┌─────────────┐   prompt    ┌───────────────┐  LiteLlm  ┌───────────┐
#   │ TripRequest │ ──────────▶ │  ADK Runner   │ ────────▶ │   Model   │
#   └─────────────┘             │  + Agent      │ ◀──────── │           │
#                               └───────────────┘   text    └───────────┘
# =============================================================================

import logging
import uuid
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.prompt import ITINERARY_PLANNER_INSTRUCTION, build_itinerary_prompt
from core.config import Settings, load_settings
from core.models import TripRequest

logger = logging.getLogger(__name__)

APP_NAME = "trip_itinerary_planner"


class ItineraryGenerationError(RuntimeError):
    """The model run finished without producing an itinerary."""


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create the itinerary planner agent.

    The agent has no tools.  It receives one trip prompt and answers with
    the itinerary text.

    Args:
        settings: Runtime settings; loaded from the environment if omitted.

    Returns:
        A configured Google ADK Agent instance.
    """
    settings = settings or load_settings()

    return Agent(
        name="itinerary_planner",
        model=LiteLlm(model=settings.model),
        instruction=ITINERARY_PLANNER_INSTRUCTION,
        generate_content_config=types.GenerateContentConfig(
            max_output_tokens=settings.max_tokens,
        ),
    )


async def generate_itinerary(
    request: TripRequest,
    settings: Optional[Settings] = None,
) -> str:
    """Ask the model for an itinerary and return its raw text.

    Args:
        request: A validated TripRequest.
        settings: Runtime settings; loaded from the environment if omitted.

    Returns:
        The itinerary as the model wrote it (markdown, not yet rendered).

    Raises:
        InvalidTripDatesError: If the request dates cannot be parsed.
        ItineraryGenerationError: If the model returned no text.
    """
    prompt = build_itinerary_prompt(request)

    session_service = InMemorySessionService()
    runner = Runner(
        agent=create_agent(settings),
        app_name=APP_NAME,
        session_service=session_service,
    )
    user_id = f"traveler-{uuid.uuid4().hex[:8]}"
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=user_id,
    )

    user_message = types.Content(
        role="user",
        parts=[types.Part(text=prompt)],
    )

    logger.info("Requesting itinerary for %s -> %s", request.origin, request.destination)

    final_response = ""
    async for event in runner.run_async(
        user_id=user_id,
        session_id=session.id,
        new_message=user_message,
    ):
        if not event.is_final_response():
            continue
        if event.content and event.content.parts:
            final_response = "".join(
                part.text for part in event.content.parts if part.text
            )

    if not final_response.strip():
        raise ItineraryGenerationError("The model returned an empty itinerary.")

    logger.info("Itinerary generated (%d characters)", len(final_response))
    return final_response
