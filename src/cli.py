"""Terminal client for the weather service.

Lets the user search the city directory, pick a city by number and prints
the observation returned by ``POST /api/weather`` together with a 5-day
outlook. The flow runs on the same view-state cycle as the browser page.
"""

from datetime import date
from typing import Callable, List, Optional
import logging
import os

from dotenv import load_dotenv

from client import WeatherClientError, WeatherHttpClient
from climate.cities import TRUNCATION_NOTICE, CityFilterResult
from climate.forecast import build_forecast, feels_like
from climate.observation import RandomSource
from ui.view_state import (
    CitySelected,
    SearchChanged,
    ViewState,
    ViewStatus,
    WeatherFailed,
    WeatherLoaded,
    update,
    visible_cities,
)

logger = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit", "exit")


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Helper to read environment variables with a default value."""
    val = os.getenv(name)
    return val if val is not None and val != "" else default


def render_city_list(listing: CityFilterResult) -> str:
    """Numbered list of the displayed cities."""
    if not listing.shown:
        return "No cities match your search."
    lines = [f"{i:>3}. {city.name} ({city.state})" for i, city in enumerate(listing.shown, start=1)]
    if listing.truncated:
        lines.append(TRUNCATION_NOTICE)
    return "\n".join(lines)


def render_observation(
    state: ViewState,
    rng: Optional[RandomSource] = None,
    today: Optional[date] = None,
) -> str:
    """Text panel for the current status of the view."""
    if state.status == ViewStatus.IDLE:
        return "Select a city to view its weather information."
    if state.status == ViewStatus.LOADING:
        return "Loading weather data..."
    if state.status == ViewStatus.ERROR:
        return f"Could not load weather for {state.selected_label}: {state.error}"

    obs = state.observation
    lines: List[str] = [
        f"{obs.city_name}, {obs.region_name}",
        obs.description,
        f"{obs.temperature_c}°C  {obs.condition.capitalize()}  (feels like {feels_like(obs, rng)}°C)",
        f"Humidity: {obs.humidity_pct}%  Wind: {obs.wind_speed_kmh} km/h  Visibility: {obs.visibility_km} km",
        "",
        "5-day outlook:",
    ]
    for day in build_forecast(obs, rng, today):
        lines.append(f"  {day.day_label:<6} {day.temperature_c:>3}°  {day.condition}")
    return "\n".join(lines)


def select_city(state: ViewState, index: int, client: WeatherHttpClient) -> ViewState:
    """Select the ``index``-th displayed city (1-based) and fetch its weather."""
    listing = visible_cities(state)
    if not 1 <= index <= len(listing.shown):
        raise IndexError(f"Choose a number between 1 and {len(listing.shown)}")
    city = listing.shown[index - 1]
    state = update(state, CitySelected(city))
    try:
        observation = client.fetch_weather(city.name, city.state)
    except WeatherClientError as e:
        logger.warning("Weather request for %s failed: %s", state.selected_label, e.message)
        return update(state, WeatherFailed(city, e.message))
    return update(state, WeatherLoaded(observation))


def run(
    client: WeatherHttpClient,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> ViewState:
    """Interactive loop; returns the last view state when the user quits."""
    state = ViewState()
    while True:
        term = read("Search city or state (Enter for all, q to quit): ").strip()
        if term.lower() in QUIT_WORDS:
            return state
        state = update(state, SearchChanged(term))
        listing = visible_cities(state)
        write(render_city_list(listing))
        if not listing.shown:
            continue

        choice = read("City number (Enter to search again): ").strip()
        if choice.lower() in QUIT_WORDS:
            return state
        if not choice:
            continue
        try:
            index = int(choice)
        except ValueError:
            index = 0
        if not 1 <= index <= len(listing.shown):
            write(f"Invalid choice: {choice}")
            continue
        write(render_observation(update(state, CitySelected(listing.shown[index - 1]))))
        state = select_city(state, index, client)
        write(render_observation(state))


def main() -> None:
    """Entrypoint for the terminal client."""
    load_dotenv()
    logging.basicConfig(level=(_get_env("LOG_LEVEL", "WARNING") or "WARNING").upper())
    endpoint = _get_env("WEATHER_BASE_URL", "http://localhost:8000") or "http://localhost:8000"
    client = WeatherHttpClient(endpoint)
    try:
        run(client)
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":
    main()
