# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These types define the shape of every piece of information that flows
# through the planner.  They carry no behavior of their own.
#
#   TripRequest  -  what the traveler asked for (form fields)
#   LineKind     -  how one line of model output is classified for rendering
#   ViewState    -  which part of the results page is visible
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum


# -----------------------------------------------------------------------------
# TripRequest - the traveler's preferences, as collected by the form / CLI
# -----------------------------------------------------------------------------
# Dates stay as ISO strings ("2025-11-01") because that is what the form
# sends and what goes into the prompt verbatim.  num_people is kept as the
# raw string the user typed.
# -----------------------------------------------------------------------------
@dataclass
class TripRequest:
    """A traveler's trip preferences."""

    origin: str                        # "San Francisco"
    destination: str                   # "Tokyo"
    start: str                         # ISO date: "2025-11-01"
    end: str                           # ISO date: "2025-11-08"
    num_people: str = "1"              # As entered on the form
    activity: list[str] = field(default_factory=list)
    # e.g., ["museums", "hiking"]
    food: list[str] = field(default_factory=list)
    # e.g., ["street food", "vegetarian"]


# -----------------------------------------------------------------------------
# LineKind - closed set of line classifications
# -----------------------------------------------------------------------------
# Declaration order IS the priority order the renderer checks them in.
# HEADING3 must come before HEADING1, otherwise "### Day 1" would be
# claimed by the one-hash rule.
# -----------------------------------------------------------------------------
class LineKind(Enum):
    """Classification of a single line of itinerary text."""

    HEADING3 = "heading3"
    HEADING2 = "heading2"
    HEADING1 = "heading1"
    STANDALONE_BOLD = "standalone_bold"   # whole line wrapped in **...**
    LIST_ITEM = "list_item"
    RULE = "rule"                         # trims to exactly "---"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


# -----------------------------------------------------------------------------
# ViewState - what the results page is currently showing
# -----------------------------------------------------------------------------
class ViewState(Enum):
    """Explicit state of the results page."""

    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"
