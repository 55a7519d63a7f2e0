from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from climate.observation import ObservationResult, RandomSource, SystemRandomSource

FORECAST_DAYS = 5
FORECAST_CONDITIONS = ("Sunny", "Cloudy", "Rainy", "Partly Cloudy", "Clear")
FORECAST_OFFSET_RANGE = (-5, 5)
FEELS_LIKE_OFFSET_RANGE = (-3, 2)

# Indexed by date.weekday(); fixed so labels do not follow the process locale.
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class ForecastDay:
    """One column of the 5-day outlook."""

    day_label: str
    temperature_c: int
    condition: str


def day_label(today: date, offset: int) -> str:
    if offset == 0:
        return "Today"
    return WEEKDAY_LABELS[(today + timedelta(days=offset)).weekday()]


def build_forecast(
    observation: ObservationResult,
    rng: Optional[RandomSource] = None,
    today: Optional[date] = None,
) -> List[ForecastDay]:
    """
    Build a display-only outlook around the observed temperature.

    Parameters
    ----------
    observation : ObservationResult
        Current observation whose temperature anchors the outlook.
    rng : RandomSource | None, optional
        Source of the random draws.
    today : date | None, optional
        Reference date for the weekday labels, defaults to ``date.today()``.

    Returns
    -------
    List[ForecastDay]
        Five independently drawn days, the first labelled "Today".
    """
    rng = rng or SystemRandomSource()
    today = today or date.today()
    days: List[ForecastDay] = []
    for offset in range(FORECAST_DAYS):
        temperature = observation.temperature_c + rng.next_int(*FORECAST_OFFSET_RANGE)
        condition = FORECAST_CONDITIONS[rng.next_int(0, len(FORECAST_CONDITIONS) - 1)]
        days.append(ForecastDay(day_label(today, offset), temperature, condition))
    return days


def feels_like(observation: ObservationResult, rng: Optional[RandomSource] = None) -> int:
    """Apparent temperature shown beside the observed one."""
    rng = rng or SystemRandomSource()
    return observation.temperature_c + rng.next_int(*FEELS_LIKE_OFFSET_RANGE)
