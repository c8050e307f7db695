"""FastAPI web application for Country Service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.resolver.base import PhoneParser, UserInputRequest, WhitelistRequest
from src.resolver.errors import ResolutionError
from src.resolver.key_resolver import resolve_user_input
from src.resolver.libphone_parser import LibPhoneParser
from src.resolver.whitelist_resolver import resolve_whitelist
from src.utils.config_loader import ServiceSettings, load_service_settings
from src.utils.logger import setup_logger

SERVICE_NAME = "Country Service API"
HEALTH_MESSAGE = "Service is running"


@dataclass(frozen=True)
class RouteSpec:
    """A single GET route to register on the app."""

    path: str
    endpoint: Callable[..., Any]
    name: str


def envelope(status_code: int, message: str, text: bool = False) -> JSONResponse:
    """Wrap a message in the {"code", "result": [{...}]} response body."""
    item: Dict[str, str] = {"type": "text", "message": message} if text else {"message": message}
    return JSONResponse(
        status_code=status_code,
        content={"code": str(status_code), "result": [item]},
    )


def build_routes(settings: ServiceSettings, parser: PhoneParser) -> List[RouteSpec]:
    """Build the route table for the service.

    Args:
        settings: Service settings shared by every handler.
        parser: Phone metadata capability used for country resolution.

    Returns:
        Route definitions, in registration order.
    """

    async def resolve_user_input_endpoint(
        number: Optional[str] = Query(None, alias="input"),
        validkeys: Optional[str] = Query(None),
        notallowedkeys: Optional[str] = Query(None),
        defaultkey: Optional[str] = Query(None),
    ) -> JSONResponse:
        request = UserInputRequest(
            input=number,
            validkeys=validkeys,
            notallowedkeys=notallowedkeys,
            defaultkey=defaultkey,
        )
        resolution = resolve_user_input(request, parser, settings)
        return envelope(200, resolution.message)

    async def resolve_whitelist_endpoint(
        number: Optional[str] = Query(None, alias="input"),
        allowednumbers: Optional[str] = Query(None),
        defaultkey: Optional[str] = Query(None),
    ) -> JSONResponse:
        request = WhitelistRequest(
            input=number,
            allowednumbers=allowednumbers,
            defaultkey=defaultkey,
        )
        resolution = resolve_whitelist(request, settings)
        return envelope(200, resolution.message)

    async def health_check() -> JSONResponse:
        """Health check endpoint."""
        return envelope(200, HEALTH_MESSAGE, text=True)

    async def root() -> JSONResponse:
        return envelope(200, SERVICE_NAME)

    return [
        RouteSpec("/resolve/user/input", resolve_user_input_endpoint, "resolve_user_input"),
        RouteSpec("/resolve/number/whitelist", resolve_whitelist_endpoint, "resolve_whitelist"),
        RouteSpec("/health", health_check, "health"),
        RouteSpec("/status", health_check, "status"),
        RouteSpec("/", root, "root"),
    ]


def create_app(
    settings: Optional[ServiceSettings] = None,
    parser: Optional[PhoneParser] = None,
    routes: Optional[List[RouteSpec]] = None,
) -> FastAPI:
    """Create the FastAPI app and register the route table on it.

    Args:
        settings: Service settings. Loaded from config/service.yaml if None.
        parser: Phone parser. Defaults to LibPhoneParser.
        routes: Route table. Built with build_routes() if None.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or load_service_settings()
    parser = parser or LibPhoneParser()
    logger = setup_logger(log_level=settings.log_level, log_file=settings.log_file)

    app = FastAPI(
        title=SERVICE_NAME,
        description="Classifies a phone number's country against allow/deny lists",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    async def handle_resolution_error(request: Request, exc: ResolutionError) -> JSONResponse:
        logger.warning(f"Rejected {request.url.path}: {exc.message}")
        return envelope(400, exc.message, text=True)

    app.add_exception_handler(ResolutionError, handle_resolution_error)

    for route in routes if routes is not None else build_routes(settings, parser):
        app.add_api_route(route.path, route.endpoint, methods=["GET"], name=route.name)

    logger.info(f"{SERVICE_NAME} ready with {len(app.routes)} routes")
    return app
