from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping


@dataclass(frozen=True)
class RegionClimateProfile:
    """
    Baseline climate of a region before any randomization is applied.

    Attributes
    ----------
    region_name : str
        State name used as the lookup key.
    baseline_temperature_c : int
        Typical temperature in Celsius degrees.
    condition : str
        Short condition label (e.g. "hot", "humid").
    description : str
        Human-readable summary of the regional climate.
    """

    region_name: str
    baseline_temperature_c: int
    condition: str
    description: str


def _profile(region_name: str, temperature: int, condition: str, description: str) -> RegionClimateProfile:
    return RegionClimateProfile(region_name, temperature, condition, description)


DEFAULT_PROFILE = RegionClimateProfile(
    region_name="",
    baseline_temperature_c=25,
    condition="pleasant",
    description="Pleasant weather conditions",
)

CLIMATE_TABLE: Mapping[str, RegionClimateProfile] = MappingProxyType(
    {
        p.region_name: p
        for p in (
            # Northern plains
            _profile("Punjab", 28, "sunny", "Clear skies with warm weather"),
            _profile("Haryana", 30, "sunny", "Hot and dry conditions"),
            _profile("Uttar Pradesh", 32, "partly cloudy", "Warm with occasional clouds"),
            _profile("Bihar", 34, "hot", "Very hot and humid"),
            # Western India
            _profile("Rajasthan", 38, "hot", "Extremely hot and dry desert climate"),
            _profile("Gujarat", 35, "sunny", "Hot and dry with clear skies"),
            _profile("Maharashtra", 31, "partly cloudy", "Warm with moderate humidity"),
            # Southern India
            _profile("Tamil Nadu", 29, "humid", "Hot and humid tropical weather"),
            _profile("Karnataka", 27, "pleasant", "Pleasant weather with mild temperatures"),
            _profile("Kerala", 26, "humid", "Warm and humid coastal climate"),
            _profile("Andhra Pradesh", 33, "hot", "Hot and humid conditions"),
            _profile("Telangana", 32, "warm", "Warm and dry weather"),
            # Eastern India
            _profile("West Bengal", 30, "humid", "Hot and humid with high moisture"),
            _profile("Odisha", 32, "humid", "Hot and humid coastal weather"),
            _profile("Jharkhand", 28, "pleasant", "Moderate temperatures with humidity"),
            # Northeast
            _profile("Assam", 25, "rainy", "Monsoon climate with frequent rainfall"),
            _profile("Meghalaya", 22, "rainy", "Cool and wet hill station weather"),
            _profile("Manipur", 24, "pleasant", "Pleasant hill climate"),
            _profile("Mizoram", 23, "cool", "Cool and pleasant mountain weather"),
            _profile("Nagaland", 21, "cool", "Cool hill station climate"),
            _profile("Tripura", 26, "humid", "Warm and humid subtropical climate"),
            _profile("Arunachal Pradesh", 20, "cool", "Cool mountain climate"),
            # Central India
            _profile("Madhya Pradesh", 31, "warm", "Warm and dry continental climate"),
            _profile("Chhattisgarh", 29, "pleasant", "Pleasant weather with moderate humidity"),
            # Himalayan states
            _profile("Himachal Pradesh", 18, "cool", "Cool mountain weather"),
            _profile("Uttarakhand", 20, "pleasant", "Pleasant hill station climate"),
            _profile("Sikkim", 16, "cool", "Cool Himalayan climate"),
            # Coast
            _profile("Goa", 28, "humid", "Warm and humid coastal weather"),
        )
    }
)


def lookup(region_name: str) -> RegionClimateProfile:
    """
    Resolve the baseline climate for a region.

    Parameters
    ----------
    region_name : str
        Exact (case-sensitive) state name.

    Returns
    -------
    RegionClimateProfile
        The region's profile, or ``DEFAULT_PROFILE`` when the name is unknown.
    """
    return CLIMATE_TABLE.get(region_name, DEFAULT_PROFILE)


def known_regions() -> List[str]:
    """Region names in table order."""
    return list(CLIMATE_TABLE.keys())
