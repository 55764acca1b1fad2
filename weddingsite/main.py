import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weddingsite.api.site import router as site_router
from weddingsite.api.v1.api import api_router
from weddingsite.config import settings
from weddingsite.logging_config import setup_logging
from weddingsite.middleware.custom_domain import CustomDomainMiddleware
from weddingsite.middleware.request_logging import RequestLoggingMiddleware

# ── Initialize structured logging ──
setup_logging()
logger = logging.getLogger("weddingsite.app")

app = FastAPI(
    title=settings.APP_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)

cors_origins = ["http://localhost:3000"]
if settings.BACKEND_CORS_ORIGINS:
    cors_origins.extend([origin.strip() for origin in settings.BACKEND_CORS_ORIGINS.split(",") if origin.strip()])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom domain routing – rewrites custom-domain requests to /site/{subdomain}
app.add_middleware(CustomDomainMiddleware)

# Request logging – added last so it wraps everything and logs the original path
app.add_middleware(RequestLoggingMiddleware)


# ── Error bodies always carry an "error" field ──

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        for e in exc.errors()
    ]
    first = details[0] if details else {"loc": [], "msg": "invalid value"}
    field = ".".join(str(p) for p in first["loc"][1:]) or "request"
    return JSONResponse(
        status_code=422,
        content={"error": f"{field}: {first['msg']}", "details": details},
    )


# Mount API v1 and the site pages
app.include_router(api_router, prefix=settings.API_V1_STR)
app.include_router(site_router, prefix="/site", tags=["site"])


@app.get("/health")
def health_check():
    return {"status": "ok", "env": settings.APP_ENV}
