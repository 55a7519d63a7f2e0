"""
Model-update cycle behind both the browser page and the terminal client.

The state is an immutable :class:`ViewState`; every user action or server
reply is a message, and :func:`update` returns the next state. Views only
read the state, they never change it in place.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from climate.cities import City, CityFilterResult, filter_cities
from climate.observation import ObservationResult


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    DISPLAYED = "displayed"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    search_term: str = ""
    selected_city: Optional[City] = None
    status: ViewStatus = ViewStatus.IDLE
    observation: Optional[ObservationResult] = None
    error: Optional[str] = None

    @property
    def selected_label(self) -> str:
        if self.selected_city is None:
            return ""
        return f"{self.selected_city.name}, {self.selected_city.state}"


@dataclass(frozen=True)
class SearchChanged:
    term: str


@dataclass(frozen=True)
class CitySelected:
    city: City


@dataclass(frozen=True)
class WeatherLoaded:
    observation: ObservationResult


@dataclass(frozen=True)
class WeatherFailed:
    city: City
    error: str


Message = Union[SearchChanged, CitySelected, WeatherLoaded, WeatherFailed]


def _is_current(state: ViewState, city: City) -> bool:
    return state.status == ViewStatus.LOADING and state.selected_city == city


def update(state: ViewState, message: Message) -> ViewState:
    """
    Apply one message to the view state.

    Selecting a city always restarts at ``LOADING``. Replies for any city
    other than the one currently loading are dropped, so the last selection
    wins when requests overlap.
    """
    if isinstance(message, SearchChanged):
        return replace(state, search_term=message.term)

    if isinstance(message, CitySelected):
        return replace(
            state,
            selected_city=message.city,
            status=ViewStatus.LOADING,
            observation=None,
            error=None,
        )

    if isinstance(message, WeatherLoaded):
        observation = message.observation
        if not _is_current(state, City(observation.city_name, observation.region_name)):
            return state
        return replace(state, status=ViewStatus.DISPLAYED, observation=observation, error=None)

    if isinstance(message, WeatherFailed):
        if not _is_current(state, message.city):
            return state
        return replace(state, status=ViewStatus.ERROR, observation=None, error=message.error)

    raise TypeError(f"Unsupported message: {message!r}")


def visible_cities(state: ViewState) -> CityFilterResult:
    """Directory entries matching the current search term."""
    return filter_cities(state.search_term)
