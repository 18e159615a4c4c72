# =============================================================================
# core/trip_request.py  -  Trip Request Validation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the raw form payload (a dict, usually decoded JSON) into a
#   TripRequest, and computes the length of stay used in the prompt.
#
# WIRE NAMES:
#   The form sends camelCase ("numPeople").  Both "numPeople" and
#   "num_people" are accepted so the same parser serves the HTTP endpoint,
#   the MCP tool and the CLI.
# =============================================================================

from datetime import date

from core.models import TripRequest

REQUIRED_FIELDS = ("origin", "destination", "start", "end")


class TripRequestError(ValueError):
    """Base class for trip requests the planner cannot use."""


class MissingTripFieldsError(TripRequestError):
    """One or more required fields are missing or empty."""

    def __init__(self, missing: list[str]):
        super().__init__("Missing required fields")
        self.missing = missing


class InvalidTripDatesError(TripRequestError):
    """Start or end date is not an ISO date."""


class InvalidTripFieldError(TripRequestError):
    """A preference field is neither a string nor a list of strings."""


def _as_list(name: str, value) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, (list, tuple)):
        raise InvalidTripFieldError(
            f"{name} must be a string or a list of strings, got {type(value).__name__}"
        )
    return [str(item) for item in value]


def parse_trip_request(data: dict) -> TripRequest:
    """Build a TripRequest from a form payload.

    Args:
        data: Mapping with origin, destination, start, end and optionally
              numPeople/num_people, activity and food.

    Returns:
        A populated TripRequest.

    Raises:
        MissingTripFieldsError: If any of REQUIRED_FIELDS is absent or blank.
        InvalidTripFieldError: If activity or food is not a string or list.
    """
    missing = [
        name for name in REQUIRED_FIELDS
        if not str(data.get(name) or "").strip()
    ]
    if missing:
        raise MissingTripFieldsError(missing)

    num_people = data.get("numPeople", data.get("num_people"))

    return TripRequest(
        origin=str(data["origin"]).strip(),
        destination=str(data["destination"]).strip(),
        start=str(data["start"]).strip(),
        end=str(data["end"]).strip(),
        num_people=str(num_people).strip() if num_people not in (None, "") else "1",
        activity=_as_list("activity", data.get("activity")),
        food=_as_list("food", data.get("food")),
    )


def length_of_stay(request: TripRequest) -> int:
    """Number of days between start and end.

    Raises:
        InvalidTripDatesError: If either date is not in ISO format.
    """
    try:
        start = date.fromisoformat(request.start)
        end = date.fromisoformat(request.end)
    except ValueError as exc:
        raise InvalidTripDatesError(
            f"Invalid trip dates: start={request.start!r}, end={request.end!r}"
        ) from exc

    return (end - start).days
