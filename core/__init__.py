# =============================================================================
# core/__init__.py
# =============================================================================
# Pure-Python logic for the trip itinerary planner: data models, trip
# request validation, settings, the itinerary markup renderer and the
# results-page view.
#
# Nothing in this package imports Google ADK or FastMCP.
# =============================================================================
