from dataclasses import dataclass
from typing import Iterable, NamedTuple, Tuple

DISPLAY_LIMIT = 50
TRUNCATION_NOTICE = "Showing first 50 results. Refine your search for more specific results."

STATE_BADGE_CLASSES = (
    "bg-blue-100 text-blue-800",
    "bg-green-100 text-green-800",
    "bg-purple-100 text-purple-800",
    "bg-orange-100 text-orange-800",
    "bg-pink-100 text-pink-800",
    "bg-indigo-100 text-indigo-800",
    "bg-yellow-100 text-yellow-800",
    "bg-red-100 text-red-800",
)


class City(NamedTuple):
    name: str
    state: str


def _cities(state: str, *names: str) -> Tuple[City, ...]:
    return tuple(City(name, state) for name in names)


INDIAN_CITIES: Tuple[City, ...] = (
    *_cities("Andhra Pradesh", "Visakhapatnam", "Vijayawada", "Guntur", "Tirupati", "Nellore"),
    *_cities("Arunachal Pradesh", "Itanagar", "Tawang", "Pasighat", "Ziro"),
    *_cities("Assam", "Guwahati", "Dibrugarh", "Silchar", "Jorhat", "Tezpur"),
    *_cities("Bihar", "Patna", "Gaya", "Bhagalpur", "Muzaffarpur", "Darbhanga"),
    *_cities("Chhattisgarh", "Raipur", "Bhilai", "Bilaspur", "Korba"),
    *_cities("Goa", "Panaji", "Margao", "Vasco da Gama", "Mapusa", "Ponda"),
    *_cities("Gujarat", "Ahmedabad", "Surat", "Vadodara", "Rajkot", "Bhavnagar"),
    *_cities("Haryana", "Gurugram", "Faridabad", "Panipat", "Ambala", "Karnal"),
    *_cities("Himachal Pradesh", "Shimla", "Manali", "Dharamshala", "Kullu", "Solan"),
    *_cities("Jharkhand", "Ranchi", "Jamshedpur", "Dhanbad", "Bokaro"),
    *_cities("Karnataka", "Bengaluru", "Mysuru", "Mangaluru", "Hubballi", "Belagavi"),
    *_cities("Kerala", "Thiruvananthapuram", "Kochi", "Kozhikode", "Thrissur", "Kannur"),
    *_cities("Madhya Pradesh", "Bhopal", "Indore", "Gwalior", "Jabalpur", "Ujjain"),
    *_cities("Maharashtra", "Mumbai", "Pune", "Nagpur", "Nashik", "Aurangabad"),
    *_cities("Manipur", "Imphal", "Thoubal", "Churachandpur"),
    *_cities("Meghalaya", "Shillong", "Tura", "Jowai"),
    *_cities("Mizoram", "Aizawl", "Lunglei", "Champhai"),
    *_cities("Nagaland", "Kohima", "Dimapur", "Mokokchung"),
    *_cities("Odisha", "Bhubaneswar", "Cuttack", "Rourkela", "Puri", "Sambalpur"),
    *_cities("Punjab", "Ludhiana", "Amritsar", "Jalandhar", "Patiala", "Bathinda"),
    *_cities("Rajasthan", "Jaipur", "Jodhpur", "Udaipur", "Kota", "Bikaner", "Ajmer"),
    *_cities("Sikkim", "Gangtok", "Namchi", "Mangan"),
    *_cities("Tamil Nadu", "Chennai", "Coimbatore", "Madurai", "Tiruchirappalli", "Salem"),
    *_cities("Telangana", "Hyderabad", "Warangal", "Nizamabad", "Karimnagar"),
    *_cities("Tripura", "Agartala", "Udaipur", "Dharmanagar"),
    *_cities("Uttar Pradesh", "Lucknow", "Kanpur", "Varanasi", "Agra", "Prayagraj", "Noida"),
    *_cities("Uttarakhand", "Dehradun", "Haridwar", "Rishikesh", "Nainital", "Haldwani"),
    *_cities("West Bengal", "Kolkata", "Howrah", "Durgapur", "Siliguri", "Darjeeling"),
)


@dataclass(frozen=True)
class CityFilterResult:
    """
    Outcome of a directory search.

    Attributes
    ----------
    matches : Tuple[City, ...]
        Every matching city, in directory order.
    shown : Tuple[City, ...]
        The leading slice of ``matches`` that fits the display limit.
    truncated : bool
        True when some matches are not shown.
    """

    matches: Tuple[City, ...]
    shown: Tuple[City, ...]
    truncated: bool


def matches(city: City, search_term: str) -> bool:
    term = search_term.lower()
    return term in city.name.lower() or term in city.state.lower()


def filter_cities(
    search_term: str,
    cities: Iterable[City] = INDIAN_CITIES,
    limit: int = DISPLAY_LIMIT,
) -> CityFilterResult:
    """
    Case-insensitive substring search over city and state names.

    Parameters
    ----------
    search_term : str
        Text typed by the user. An empty term matches every city.
    cities : Iterable[City], optional
        Directory to search, the built-in Indian city list by default.
    limit : int, optional
        Maximum number of entries to display.

    Returns
    -------
    CityFilterResult
        All matches plus the display slice and a truncation flag.
    """
    found = tuple(city for city in cities if matches(city, search_term or ""))
    return CityFilterResult(matches=found, shown=found[:limit], truncated=len(found) > limit)


def state_badge_class(state: str) -> str:
    """Badge colour for a state, stable across renders."""
    return STATE_BADGE_CLASSES[len(state) % len(STATE_BADGE_CLASSES)]
