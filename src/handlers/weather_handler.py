import asyncio
import logging
from typing import Any, Dict, Optional, Tuple

from climate.observation import ObservationRequest, RandomSource, ValidationError, generate

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Failed to fetch weather data"


async def handle_weather_request(
    payload: Any,
    rng: Optional[RandomSource] = None,
    delay_seconds: float = 0.0,
) -> Tuple[int, Dict[str, Any]]:
    """
    Turn a decoded ``POST /api/weather`` body into a status code and JSON body.

    Parameters
    ----------
    payload : Any
        Decoded request body, expected to be ``{"city": str, "state": str}``.
    rng : RandomSource | None, optional
        Random source handed to the observation generator.
    delay_seconds : float, optional
        Simulated network latency awaited before a successful reply.

    Returns
    -------
    Tuple[int, Dict[str, Any]]
        ``(200, observation)`` on success, ``(400, {"error": ...})`` when the
        city or state is missing, ``(500, {"error": ...})`` on any other failure.
    """
    try:
        request = ObservationRequest.from_payload(payload)
        observation = generate(request, rng)
        if delay_seconds > 0:
            await asyncio.sleep(delay_seconds)
    except ValidationError as e:
        logger.info("Rejected weather request: %s", e)
        return 400, {"error": str(e)}
    except Exception:
        logger.exception("Weather API error")
        return 500, {"error": UNEXPECTED_ERROR_MESSAGE}

    logger.debug("Generated observation for %s, %s", observation.city_name, observation.region_name)
    return 200, observation.to_wire()
