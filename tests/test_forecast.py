from datetime import date

import pytest

from climate.forecast import FORECAST_CONDITIONS, ForecastDay, build_forecast, day_label, feels_like
from climate.observation import ObservationRequest, ObservationResult, SystemRandomSource

MONDAY = date(2024, 1, 1)


@pytest.fixture
def observation():
    return ObservationResult(
        city_name="Panaji",
        region_name="Goa",
        temperature_c=30,
        humidity_pct=60,
        wind_speed_kmh=10,
        visibility_km=10,
        condition="humid",
        description="Warm and humid coastal weather",
    )


def test_five_days_first_is_today(observation):
    days = build_forecast(observation, today=MONDAY)
    assert [d.day_label for d in days] == ["Today", "Tue", "Wed", "Thu", "Fri"]


def test_labels_wrap_over_the_week():
    friday = date(2024, 1, 5)
    assert [day_label(friday, i) for i in range(5)] == ["Today", "Sat", "Sun", "Mon", "Tue"]


def test_scripted_forecast(observation, scripted):
    rng = scripted([-5, 0, 5, 4, 0, 1, 3, 2, -1, 3])
    days = build_forecast(observation, rng, MONDAY)
    assert days == [
        ForecastDay("Today", 25, "Sunny"),
        ForecastDay("Tue", 35, "Clear"),
        ForecastDay("Wed", 30, "Cloudy"),
        ForecastDay("Thu", 33, "Rainy"),
        ForecastDay("Fri", 29, "Partly Cloudy"),
    ]
    assert rng.calls[:2] == [(-5, 5), (0, len(FORECAST_CONDITIONS) - 1)]


def test_forecast_bounds(observation):
    rng = SystemRandomSource(99)
    for _ in range(200):
        for day in build_forecast(observation, rng, MONDAY):
            assert 25 <= day.temperature_c <= 35
            assert day.condition in FORECAST_CONDITIONS


def test_forecast_uses_observed_temperature(lowest):
    from climate.observation import generate

    observed = generate(ObservationRequest("Jaipur", "Rajasthan"), lowest)
    days = build_forecast(observed, lowest, MONDAY)
    assert all(d.temperature_c == observed.temperature_c - 5 for d in days)
    assert all(d.condition == "Sunny" for d in days)


def test_feels_like_range(observation, lowest, highest):
    assert feels_like(observation, lowest) == 27
    assert feels_like(observation, highest) == 32
    rng = SystemRandomSource(3)
    assert all(27 <= feels_like(observation, rng) <= 32 for _ in range(200))
