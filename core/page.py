# =============================================================================
# core/page.py  -  Results Page View
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps the results page's ViewState to the regions that should be on
#   screen, and renders exactly those regions.
#
#   LOADING  ->  loadingMessage
#   RESULT   ->  itineraryResult + backButtonContainer
#   ERROR    ->  errorMessage    + backButtonContainer
#
#   One function decides visibility.  Nothing toggles regions piecemeal.
#
# LIST ITEMS:
#   The itinerary markup contains bare <li> fragments (see
#   core/formatting.py).  The result region does not add a <ul> around
#   them; a page that wants bullets styled as a list supplies that
#   container in its own template.
# =============================================================================

from core.models import ViewState

LOADING_REGION = "loadingMessage"
ERROR_REGION = "errorMessage"
RESULT_REGION = "itineraryResult"
BACK_BUTTON_REGION = "backButtonContainer"

_VISIBLE_REGIONS: dict[ViewState, tuple[str, ...]] = {
    ViewState.LOADING: (LOADING_REGION,),
    ViewState.RESULT: (RESULT_REGION, BACK_BUTTON_REGION),
    ViewState.ERROR: (ERROR_REGION, BACK_BUTTON_REGION),
}

LOADING_MESSAGE = "<p>Generating your itinerary...</p>"
ERROR_MESSAGE = (
    "<p>Sorry, there was an error generating your itinerary.</p>"
    "<p>Please go back and try again.</p>"
)
BACK_BUTTON = '<a class="back-button" href="index.html">Plan another trip</a>'


def visible_regions(state: ViewState) -> tuple[str, ...]:
    """Return the ids of the page regions shown in ``state``."""
    return _VISIBLE_REGIONS[state]


def _region(region_id: str, body: str) -> str:
    return f'<div id="{region_id}">{body}</div>'


def render_view(state: ViewState, itinerary_html: str = "") -> str:
    """Render the visible regions of the results page for ``state``.

    Args:
        state: Current page state.
        itinerary_html: Rendered itinerary markup; only used in RESULT.

    Returns:
        The concatenated markup of every visible region, in page order.
    """
    bodies = {
        LOADING_REGION: LOADING_MESSAGE,
        ERROR_REGION: ERROR_MESSAGE,
        RESULT_REGION: itinerary_html,
        BACK_BUTTON_REGION: BACK_BUTTON,
    }
    return "".join(
        _region(region_id, bodies[region_id])
        for region_id in visible_regions(state)
    )
