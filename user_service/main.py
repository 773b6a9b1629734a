import logging

from fastapi import Depends, FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .health import build_health, build_health_down, live, ready
from .responses import PrettyJSONResponse, add_cors_headers
from .schemas import SERVICE_VERSION, InfoEnvironment, NotFound, Probe, ServiceInfo, UsersPage
from .storage import list_users

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "/health",
    "/health/ready",
    "/health/live",
    "/api/v1/users",
    "/api/v1/info",
]

ENDPOINT_DOCS = [
    "GET /health - Health check",
    "GET /health/ready - Readiness probe",
    "GET /health/live - Liveness probe",
    "GET /api/v1/users - List users (mock)",
    "GET /api/v1/info - Service information",
]

NOT_CONFIGURED = "not configured"

# Routing is exact-match only: no slash redirects and no generated docs routes.
app = FastAPI(
    title="User Service",
    version=SERVICE_VERSION,
    default_response_class=PrettyJSONResponse,
    redirect_slashes=False,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)
app.middleware("http")(add_cors_headers)


# === Routing fallbacks ===


def request_path(request: Request) -> str:
    # The path as sent on the wire: percent-encoding kept, query dropped.
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.split(b"?", 1)[0].decode("latin-1")


@app.exception_handler(StarletteHTTPException)
async def not_found(request: Request, exc: StarletteHTTPException) -> Response:
    # 405 means the path exists for another method; both fall through to 404.
    if exc.status_code not in (404, 405):
        return await http_exception_handler(request, exc)
    body = NotFound(
        path=request_path(request),
        method=request.method,
        availableEndpoints=AVAILABLE_ENDPOINTS,
    )
    return PrettyJSONResponse(status_code=404, content=body.model_dump())


@app.options("/{full_path:path}")
def preflight(full_path: str) -> Response:
    return Response(status_code=200, media_type="application/json")


# === Health ===


@app.get("/health")
def health(settings: Settings = Depends(get_settings)) -> Response:
    try:
        payload = build_health(settings)
    except Exception as exc:
        logger.warning("Health check failed: %s", exc)
        return PrettyJSONResponse(status_code=503, content=build_health_down(exc).model_dump())
    return PrettyJSONResponse(content=payload.model_dump())


@app.get("/health/ready", response_model=Probe)
def health_ready():
    return ready()


@app.get("/health/live", response_model=Probe)
def health_live():
    return live()


# === API ===


@app.get("/api/v1/users", response_model=UsersPage)
def users():
    data = list_users()
    return UsersPage(
        data=data,
        count=len(data),
        message="Mock data - service is running correctly",
    )


@app.get("/api/v1/info", response_model=ServiceInfo)
def info(settings: Settings = Depends(get_settings)):
    return ServiceInfo(
        description="User Management Service for Loyalty System",
        endpoints=ENDPOINT_DOCS,
        environment=InfoEnvironment(
            port=settings.server_port or settings.port,
            nodeEnv=settings.node_env,
            dbHost=settings.db_host or NOT_CONFIGURED,
            redisHost=settings.redis_host or NOT_CONFIGURED,
        ),
    )
