import html
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from config import Settings, settings as default_settings
from models.country import CityNotFoundResponse, CountryNotFoundResponse, LoadErrorResponse
from routers import countries, data, health
from services.dataset_service import CityNotFound, DatasetLoadError
from services.registry import CountryNotFound, DatasetRegistry

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE"]
CORS_HEADERS = ["Content-Type"]

LANDING_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Hotel API</title>
  <style>
    body {{ font-family: Arial, sans-serif; max-width: 800px; margin: 50px auto; padding: 20px; }}
    h1 {{ color: #333; }}
    .endpoint {{ background: #f4f4f4; padding: 10px; margin: 10px 0; border-radius: 5px; }}
    code {{ background: #e8e8e8; padding: 2px 6px; border-radius: 3px; }}
  </style>
</head>
<body>
  <h1>Hotel API</h1>
  <p>Welcome to the Hotel API. Available endpoints:</p>

  <div class="endpoint">
    <strong>GET /countries</strong>
    <p>Get list of all available countries</p>
    <code>Example: /countries</code>
  </div>

  <div class="endpoint">
    <strong>GET /data/:country</strong>
    <p>Get all cities for a country</p>
    <code>Example: /data/{example}</code>
  </div>

  <div class="endpoint">
    <strong>GET /data/:country/city/:planningId</strong>
    <p>Get a specific city by planning ID</p>
    <code>Example: /data/{example}/city/1</code>
  </div>

  <p>Available countries: {countries}</p>
</body>
</html>
"""


def setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )


async def country_not_found_handler(request: Request, exc: CountryNotFound):
    body = CountryNotFoundResponse(
        requested=exc.requested,
        available_countries=", ".join(exc.available),
    )
    return JSONResponse(status_code=404, content=body.model_dump(by_alias=True))


async def city_not_found_handler(request: Request, exc: CityNotFound):
    body = CityNotFoundResponse(planning_id=exc.planning_id, country=exc.country)
    return JSONResponse(status_code=404, content=body.model_dump(by_alias=True))


async def dataset_load_error_handler(request: Request, exc: DatasetLoadError):
    body = LoadErrorResponse(error=exc.message, details=exc.details)
    return JSONResponse(status_code=500, content=body.model_dump())


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API around a registry scanned from ``settings.data_dir``.

    Raises ``RegistryError`` when the data directory cannot be read, so a
    misconfigured process never starts serving.
    """
    settings = settings or default_settings

    registry = DatasetRegistry.scan(settings.data_dir)

    app = FastAPI(title="Hotel API", version="1.0.0")
    app.state.registry = registry
    app.state.limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
    )

    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(CountryNotFound, country_not_found_handler)
    app.add_exception_handler(CityNotFound, city_not_found_handler)
    app.add_exception_handler(DatasetLoadError, dataset_load_error_handler)

    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    allow_any_origin = "*" in settings.cors_origins

    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        # Stamp CORS headers on every response, not only on cross-origin requests.
        response = await call_next(request)
        origin = request.headers.get("origin")
        if allow_any_origin:
            response.headers["Access-Control-Allow-Origin"] = "*"
        elif origin in settings.cors_origins:
            response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Methods"] = ", ".join(CORS_METHODS)
        response.headers["Access-Control-Allow-Headers"] = ", ".join(CORS_HEADERS)
        return response

    app.include_router(health.router)
    app.include_router(countries.router)
    app.include_router(data.router)

    @app.get("/", response_class=HTMLResponse)
    async def root():
        names = registry.countries()
        return LANDING_PAGE.format(
            example=html.escape(names[0] if names else "thai"),
            countries=html.escape(", ".join(names)),
        )

    logger.info(
        "Hotel API ready with %d countries from %s",
        len(registry.countries()),
        registry.data_dir,
    )
    return app


setup_logging(default_settings.log_level)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=False,
        log_level=default_settings.log_level.lower(),
    )
