import math
from typing import Any, Dict, List, Mapping, Sequence, TypedDict

from pydantic import BaseModel, ConfigDict


# ============================================================================
# UPSTREAM SHAPES (NASA NeoWs /feed)
# ============================================================================

class DiameterRange(TypedDict):
    estimated_diameter_min: float
    estimated_diameter_max: float


class EstimatedDiameter(TypedDict, total=False):
    kilometers: DiameterRange
    meters: DiameterRange
    miles: DiameterRange
    feet: DiameterRange


class CloseApproach(TypedDict, total=False):
    close_approach_date: str
    miss_distance: Dict[str, str]
    relative_velocity: Dict[str, str]
    orbiting_body: str


class NearEarthObject(TypedDict, total=False):
    id: str
    name: str
    estimated_diameter: EstimatedDiameter
    close_approach_data: List[CloseApproach]


NearEarthObjects = Mapping[str, Sequence[NearEarthObject]]


# ============================================================================
# OUTPUT SHAPE
# ============================================================================

class AsteroidSummary(BaseModel):
    """Flattened asteroid record returned to clients."""

    model_config = ConfigDict(frozen=True)

    name: str
    average_size: float
    closeness_to_earth_km: float
    relative_velocity_kmh: float


# ============================================================================
# ERRORS
# ============================================================================

class FeedError(ValueError):
    """Upstream feed data could not be summarized."""


class MalformedFeedResponse(FeedError):
    pass


class MissingCloseApproachData(FeedError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Asteroid {name!r} has no close approach data")


class MalformedNumericField(FeedError):
    def __init__(self, name, field, value):
        self.name = name
        self.field = field
        self.value = value
        super().__init__(
            f"Asteroid {name!r} has a non-numeric {field}: {value!r}"
        )


# ============================================================================
# TRANSFORMATION
# ============================================================================

def parse_numeric_field(value: Any, field: str, name: str) -> float:
    """
    Parse a numeric field that NASA may send either as a number or a string.

    Raises MalformedNumericField for anything that is not a finite number.
    """
    if isinstance(value, bool):
        raise MalformedNumericField(name, field, value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise MalformedNumericField(name, field, value) from None
    if not math.isfinite(number):
        raise MalformedNumericField(name, field, value)
    return number


def extract_near_earth_objects(feed_response: Any) -> NearEarthObjects:
    """
    Pull the date -> asteroid list mapping out of a full /feed response.
    """
    if not isinstance(feed_response, Mapping):
        raise MalformedFeedResponse("Feed response is not a JSON object")
    near_earth_objects = feed_response.get("near_earth_objects")
    if not isinstance(near_earth_objects, Mapping):
        raise MalformedFeedResponse("Feed response has no near_earth_objects")
    return near_earth_objects


def summarize_asteroid(neo: NearEarthObject) -> AsteroidSummary:
    """
    Flatten a single NEO entry into an AsteroidSummary.

    Only the first close approach is used; later ones are ignored.
    """
    name = neo["name"]
    kilometers = neo["estimated_diameter"]["kilometers"]
    min_size = parse_numeric_field(
        kilometers["estimated_diameter_min"], "estimated_diameter_min", name
    )
    max_size = parse_numeric_field(
        kilometers["estimated_diameter_max"], "estimated_diameter_max", name
    )

    approaches = neo.get("close_approach_data") or []
    if not approaches:
        raise MissingCloseApproachData(name)
    approach = approaches[0]

    return AsteroidSummary(
        name=name,
        average_size=(min_size + max_size) / 2,
        closeness_to_earth_km=parse_numeric_field(
            approach["miss_distance"]["kilometers"],
            "miss_distance.kilometers",
            name,
        ),
        relative_velocity_kmh=parse_numeric_field(
            approach["relative_velocity"]["kilometers_per_hour"],
            "relative_velocity.kilometers_per_hour",
            name,
        ),
    )


def parse_nasa_data(near_earth_objects: NearEarthObjects) -> List[AsteroidSummary]:
    """
    Flatten the NeoWs date -> asteroids mapping into a list of summaries.

    Parameters:
        near_earth_objects: mapping of date string to that day's asteroids,
            as found under "near_earth_objects" in a /feed response.

    Returns:
        list: one AsteroidSummary per asteroid, in date order then in the
        order NASA listed them for that date.

    Raises:
        MissingCloseApproachData: an asteroid has no close approaches.
        MalformedNumericField: a size, distance or velocity is not numeric.
    """
    asteroids = []
    for date in near_earth_objects:
        for neo in near_earth_objects[date]:
            asteroids.append(summarize_asteroid(neo))
    return asteroids
