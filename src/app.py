import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from climate.cities import City
from climate.observation import ObservationResult, SystemRandomSource
from handlers.weather_handler import UNEXPECTED_ERROR_MESSAGE, handle_weather_request
from ui.page import page_context
from ui.view_state import CitySelected, ViewState, WeatherFailed, WeatherLoaded, update

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "ui" / "templates"


def _env_float(name: str, default: float) -> float:
    val = os.getenv(name)
    return float(val) if val not in (None, "") else default


def _env_int(name: str) -> Optional[int]:
    val = os.getenv(name)
    return int(val) if val not in (None, "") else None


def create_app(simulated_delay: float | None = None, seed: int | None = None) -> FastAPI:
    """
    Create the FastAPI application serving the weather API and the browser page.

    Parameters
    ----------
    simulated_delay : float | None, optional
        Seconds awaited before each successful weather reply. If omitted, read
        from ``WEATHER_SIMULATED_DELAY`` (default 1 second).
    seed : int | None, optional
        Seed of the random source. If omitted, read from ``WEATHER_RANDOM_SEED``;
        when neither is set the output is not reproducible.

    Returns
    -------
    FastAPI
        App with ``POST /api/weather``, ``GET /`` and ``GET /health``.
    """
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

    if simulated_delay is None:
        simulated_delay = _env_float("WEATHER_SIMULATED_DELAY", 1.0)
    if seed is None:
        seed = _env_int("WEATHER_RANDOM_SEED")
    rng = SystemRandomSource(seed)
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    app = FastAPI(title="indian-weather-station")

    @app.post("/api/weather")
    async def weather(request: Request):
        """Synthetic observation for a ``{"city", "state"}`` body."""
        try:
            payload = await request.json()
        except ValueError:
            logger.exception("Weather API error: unreadable request body")
            return JSONResponse({"error": UNEXPECTED_ERROR_MESSAGE}, status_code=500)
        status, body = await handle_weather_request(payload, rng, simulated_delay)
        return JSONResponse(body, status_code=status)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request, q: str = "", city: str = "", state: str = ""):
        """Server-rendered city list and, when a city is selected, its weather."""
        view = ViewState(search_term=q)
        if city and state:
            selected = City(city, state)
            view = update(view, CitySelected(selected))
            status, body = await handle_weather_request({"city": city, "state": state}, rng, simulated_delay)
            if status == 200:
                view = update(view, WeatherLoaded(ObservationResult.from_wire(body)))
            else:
                view = update(view, WeatherFailed(selected, body.get("error", UNEXPECTED_ERROR_MESSAGE)))
        return templates.TemplateResponse(request, "index.html", page_context(view, rng))

    @app.get("/health")
    async def health():
        """Simple health endpoint indicating the service is running."""
        return PlainTextResponse("indian-weather-station is running")

    return app


def main() -> None:
    """Serve the app with uvicorn on ``HOST``/``PORT`` (default 0.0.0.0:8000)."""
    import uvicorn

    load_dotenv()
    uvicorn.run(
        "app:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
