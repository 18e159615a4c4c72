# =============================================================================
# agent/prompt.py  -  Planner Instruction and Trip Prompt
# =============================================================================
#
# WHAT THIS FILE DOES:
#   1. ITINERARY_PLANNER_INSTRUCTION: the agent's system instruction.
#   2. build_itinerary_prompt(): the per-trip user message.
#
# OUTPUT SHAPE:
#   The results page renders the reply with core/formatting.py, which
#   understands a handful of line shapes only:
#     "# " / "## " / "### "  headings
#     **Whole line bold**    sub-heading (rendered as <h3>)
#     "- "                   bullet
#     "---"                  separator
#     anything else          paragraph, with inline **bold**
#   The instruction asks the model to stick to exactly those shapes.
# =============================================================================

from core.models import TripRequest
from core.trip_request import length_of_stay

ITINERARY_PLANNER_INSTRUCTION = """You are a professional travel planner.
You write detailed, personalized, day-by-day travel itineraries.

Format every itinerary as plain markdown using ONLY these line shapes:
  - "# " for the itinerary title
  - "## " for major sections (e.g., each day)
  - "### " for sub-sections (e.g., Morning, Afternoon, Evening)
  - a line that is entirely **bold** for a short sub-header
  - "- " for bullet points (no nested bullets, no numbered lists)
  - "---" on its own line between days
  - **bold** inside a sentence for names of places and restaurants

Do NOT use tables, links, images, or code blocks."""


def build_itinerary_prompt(request: TripRequest) -> str:
    """Build the user prompt for one trip.

    Args:
        request: A validated TripRequest.

    Returns:
        The prompt text, with the trip details listed as bullets and the
        length of stay computed from the dates.

    Raises:
        InvalidTripDatesError: If the request dates are not ISO dates.
    """
    days = length_of_stay(request)

    return f"""You are a professional travel planner. Create a detailed, personalized travel itinerary based on the following information:

**Trip Details:**
- Origin: {request.origin}
- Destination: {request.destination}
- Start Date: {request.start}
- End Date: {request.end}
- Duration: {days} days
- Number of Travelers: {request.num_people}
- Activity Preferences: {', '.join(request.activity)}
- Food Preferences: {', '.join(request.food)}

Please create a comprehensive day-by-day itinerary that includes:
1. Daily activities that match their preferences
2. Restaurant recommendations that align with their food preferences
3. Practical tips (transportation, timing, budget estimates)
4. A balance between activities and rest time

Format the itinerary in a clear, easy-to-read structure with sections for each day."""
