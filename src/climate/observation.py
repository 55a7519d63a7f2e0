import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from climate.climate_table import lookup

REQUIRED_FIELDS_MESSAGE = "City and state are required"

# Inclusive bounds of the random draws.
TEMPERATURE_JITTER_RANGE = (-4, 4)
HUMIDITY_RANGE = (40, 80)
WIND_SPEED_RANGE = (5, 20)
VISIBILITY_RANGE = (8, 13)


class ValidationError(ValueError):
    """Raised when an observation request lacks a city or a state."""


class RandomSource(Protocol):
    def next_int(self, low: int, high: int) -> int:
        """Return a uniform integer in ``[low, high]``, both ends included."""
        ...


class SystemRandomSource:
    """Default random source backed by :class:`random.Random`."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        return self._random.randint(low, high)


@dataclass(frozen=True)
class ObservationRequest:
    """
    A city/state pair for which an observation is requested.

    Attributes
    ----------
    city_name : str
        City to report on.
    region_name : str
        State of the city, used for the climate lookup.
    """

    city_name: str
    region_name: str

    @classmethod
    def from_payload(cls, payload: Any) -> "ObservationRequest":
        """
        Build a request from a decoded JSON body of shape ``{"city", "state"}``.

        Raises
        ------
        ValidationError
            When the payload is not an object or either field is missing,
            empty or not a string. Values are passed through untouched, so
            ``"Goa "`` is a different region from ``"Goa"``.
        TypeError
            When the body is JSON ``null``.
        """
        if payload is None:
            raise TypeError("request body is null")
        if not isinstance(payload, dict):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)
        request = cls(city_name=_field(payload, "city"), region_name=_field(payload, "state"))
        request.validate()
        return request

    def validate(self) -> None:
        if not self.city_name or not self.region_name:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)


def _field(payload: Dict[str, Any], name: str) -> str:
    value = payload.get(name)
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class ObservationResult:
    """
    Synthetic "current weather" for one city.

    Attributes
    ----------
    city_name : str
        City the observation was generated for.
    region_name : str
        State of the city.
    temperature_c : int
        Temperature in Celsius degrees.
    humidity_pct : int
        Relative humidity, 40..80.
    wind_speed_kmh : int
        Wind speed in km/h, 5..20.
    visibility_km : int
        Visibility in km, 8..13.
    condition : str
        Condition label from the regional profile.
    description : str
        Climate description from the regional profile.
    """

    city_name: str
    region_name: str
    temperature_c: int
    humidity_pct: int
    wind_speed_kmh: int
    visibility_km: int
    condition: str
    description: str

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON shape returned by ``POST /api/weather``."""
        return {
            "city": self.city_name,
            "state": self.region_name,
            "temperature": self.temperature_c,
            "humidity": self.humidity_pct,
            "windSpeed": self.wind_speed_kmh,
            "visibility": self.visibility_km,
            "condition": self.condition,
            "description": self.description,
        }

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "ObservationResult":
        return cls(
            city_name=str(data["city"]),
            region_name=str(data["state"]),
            temperature_c=int(data["temperature"]),
            humidity_pct=int(data["humidity"]),
            wind_speed_kmh=int(data["windSpeed"]),
            visibility_km=int(data["visibility"]),
            condition=str(data["condition"]),
            description=str(data["description"]),
        )


def generate(request: ObservationRequest, rng: Optional[RandomSource] = None) -> ObservationResult:
    """
    Generate a synthetic observation for a city.

    Parameters
    ----------
    request : ObservationRequest
        City and state to report on.
    rng : RandomSource | None, optional
        Source of the random draws. A fresh :class:`SystemRandomSource` is used
        when omitted.

    Returns
    -------
    ObservationResult
        Regional baseline plus random jitter. Repeated calls with the same
        request are expected to differ.

    Raises
    ------
    ValidationError
        When the city or the state is empty.
    """
    request.validate()
    rng = rng or SystemRandomSource()
    profile = lookup(request.region_name)

    jitter = rng.next_int(*TEMPERATURE_JITTER_RANGE)
    humidity = rng.next_int(*HUMIDITY_RANGE)
    wind_speed = rng.next_int(*WIND_SPEED_RANGE)
    visibility = rng.next_int(*VISIBILITY_RANGE)

    return ObservationResult(
        city_name=request.city_name,
        region_name=request.region_name,
        temperature_c=profile.baseline_temperature_c + jitter,
        humidity_pct=humidity,
        wind_speed_kmh=wind_speed,
        visibility_km=visibility,
        condition=profile.condition,
        description=profile.description,
    )
