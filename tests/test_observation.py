import pytest

from climate.climate_table import lookup
from climate.observation import (
    ObservationRequest,
    ObservationResult,
    SystemRandomSource,
    ValidationError,
    generate,
)


def test_generate_composes_profile_and_draws(scripted):
    rng = scripted([-4, 55, 12, 9])
    result = generate(ObservationRequest("Jaipur", "Rajasthan"), rng)

    assert result == ObservationResult(
        city_name="Jaipur",
        region_name="Rajasthan",
        temperature_c=34,
        humidity_pct=55,
        wind_speed_kmh=12,
        visibility_km=9,
        condition="hot",
        description="Extremely hot and dry desert climate",
    )
    assert rng.calls == [(-4, 4), (40, 80), (5, 20), (8, 13)]


def test_generate_unknown_region_uses_default(highest):
    result = generate(ObservationRequest("Atlantis City", "Atlantis"), highest)
    assert result.temperature_c == 29
    assert result.condition == "pleasant"
    assert result.description == "Pleasant weather conditions"


def test_generate_extremes(lowest, highest):
    low = generate(ObservationRequest("Gangtok", "Sikkim"), lowest)
    high = generate(ObservationRequest("Gangtok", "Sikkim"), highest)
    assert (low.temperature_c, low.humidity_pct, low.wind_speed_kmh, low.visibility_km) == (12, 40, 5, 8)
    assert (high.temperature_c, high.humidity_pct, high.wind_speed_kmh, high.visibility_km) == (20, 80, 20, 13)


@pytest.mark.parametrize("region", ["Rajasthan", "Kerala", "Sikkim", "Atlantis"])
def test_generate_stays_within_bounds(region):
    baseline = lookup(region).baseline_temperature_c
    rng = SystemRandomSource(seed=1234)
    for _ in range(500):
        result = generate(ObservationRequest("Somewhere", region), rng)
        assert baseline - 4 <= result.temperature_c <= baseline + 4
        assert 40 <= result.humidity_pct <= 80
        assert 5 <= result.wind_speed_kmh <= 20
        assert 8 <= result.visibility_km <= 13


def test_generate_varies_across_calls():
    request = ObservationRequest("Panaji", "Goa")
    results = {generate(request) for _ in range(50)}
    assert len(results) > 1


def test_seeded_sources_reproduce():
    request = ObservationRequest("Panaji", "Goa")
    first = [generate(request, SystemRandomSource(7)) for _ in range(3)]
    second = [generate(request, SystemRandomSource(7)) for _ in range(3)]
    assert first == second


@pytest.mark.parametrize("city, state", [("", "Goa"), ("Panaji", ""), ("", "")])
def test_generate_rejects_empty_fields(city, state):
    with pytest.raises(ValidationError, match="City and state are required"):
        generate(ObservationRequest(city, state))


@pytest.mark.parametrize(
    "payload",
    [
        {"city": "", "state": "Goa"},
        {"city": "Panaji", "state": ""},
        {"city": "Panaji"},
        {"state": "Goa"},
        {"city": 42, "state": "Goa"},
        {"city": "Panaji", "state": None},
        ["Panaji", "Goa"],
    ],
)
def test_from_payload_rejects_incomplete_input(payload):
    with pytest.raises(ValidationError):
        ObservationRequest.from_payload(payload)


def test_from_payload_keeps_values_untouched():
    request = ObservationRequest.from_payload({"city": " Panaji", "state": "Goa "})
    assert request == ObservationRequest(" Panaji", "Goa ")


def test_blank_city_is_not_missing(lowest):
    request = ObservationRequest.from_payload({"city": " ", "state": "Goa"})
    assert generate(request, lowest).city_name == " "


def test_padded_state_is_an_unknown_region(lowest):
    result = generate(ObservationRequest.from_payload({"city": " Panaji", "state": "Goa "}), lowest)
    assert result.city_name == " Panaji"
    assert result.region_name == "Goa "
    assert result.description == "Pleasant weather conditions"
    assert result.temperature_c == 21


def test_null_body_is_not_a_validation_error():
    with pytest.raises(TypeError):
        ObservationRequest.from_payload(None)


def test_wire_shape(lowest):
    result = generate(ObservationRequest("Panaji", "Goa"), lowest)
    wire = result.to_wire()
    assert wire == {
        "city": "Panaji",
        "state": "Goa",
        "temperature": 24,
        "humidity": 40,
        "windSpeed": 5,
        "visibility": 8,
        "condition": "humid",
        "description": "Warm and humid coastal weather",
    }
    assert ObservationResult.from_wire(wire) == result
