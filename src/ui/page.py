from datetime import date
from typing import Any, Dict, Optional

from climate.cities import TRUNCATION_NOTICE, state_badge_class
from climate.forecast import build_forecast, feels_like
from climate.observation import RandomSource
from ui.view_state import ViewState, ViewStatus, visible_cities


def page_context(
    state: ViewState,
    rng: Optional[RandomSource] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Collect everything the index template needs from a view state.

    The outlook and the "feels like" value are drawn anew on every render.
    """
    listing = visible_cities(state)
    context: Dict[str, Any] = {
        "search_term": state.search_term,
        "status": state.status.value,
        "selected_label": state.selected_label,
        "cities": [
            {"name": city.name, "state": city.state, "badge": state_badge_class(city.state)}
            for city in listing.shown
        ],
        "truncation_notice": TRUNCATION_NOTICE if listing.truncated else None,
        "error": state.error,
        "observation": None,
        "feels_like": None,
        "forecast": [],
    }
    if state.status == ViewStatus.DISPLAYED and state.observation is not None:
        context["observation"] = state.observation
        context["feels_like"] = feels_like(state.observation, rng)
        context["forecast"] = build_forecast(state.observation, rng, today)
    return context
