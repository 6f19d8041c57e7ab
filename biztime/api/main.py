from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.api.core.config import settings
from biztime.api.core.db import run_migrations
from biztime.api.core.errors import BizTimeError, error_envelope
from biztime.api.core.logging import get_logger

# Routers
from biztime.api.routes import companies, industries, invoices

logger = get_logger(__name__)

app = FastAPI(
    title="BizTime API",
    version="1.0.0",
)

# ==========================
# CORS
# ==========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==========================
# Error handlers
# ==========================
@app.exception_handler(BizTimeError)
async def biztime_error_handler(request: Request, exc: BizTimeError):
    # Body is the bare message string
    return JSONResponse(status_code=exc.status_code, content=exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        "Validation error on %s %s: %s", request.method, request.url.path, exc.errors()
    )

    # A path parameter of the wrong type means no route matches
    if any(err.get("loc", ("",))[0] == "path" for err in exc.errors()):
        return JSONResponse(status_code=404, content=error_envelope("Not Found", 404))

    return JSONResponse(status_code=400, content="Error: please provide valid JSON.")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Method mismatches are reported like any other unmatched route
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content=error_envelope("Not Found", 404))

    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(str(exc.detail), exc.status_code),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500, content=error_envelope("Internal Server Error", 500)
    )


# ==========================
# Startup Event
# ==========================
@app.on_event("startup")
def startup_event():
    run_migrations()
    logger.info("Database initialized")
    logger.info("BizTime API is running")


# ==========================
# Routers
# ==========================
app.include_router(companies.router, prefix="/companies", tags=["companies"])
app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
app.include_router(industries.router, prefix="/industries", tags=["industries"])


# ==========================
# Root + Health Endpoints
# ==========================
@app.get("/")
def root():
    return {
        "service": "biztime-api",
        "status": "running",
        "endpoints": {
            "companies": "/companies/",
            "invoices": "/invoices/",
            "company_invoices": "/invoices/companies/{code}",
            "industries": "/industries/",
            "health": "/health",
        },
    }


@app.get("/health", tags=["system"])
def health_check():
    return {"status": "healthy", "service": "biztime-api"}


def run():
    """Entry point for the `biztime` console script."""
    import uvicorn

    uvicorn.run(
        "biztime.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
