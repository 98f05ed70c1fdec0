import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .errors import InvalidQuantity, UnknownCategory
from .routes.aggregate import router as aggregate_router
from .routes.estimate import router as estimate_router
from .routes.offsets import router as offsets_router
from .routes.records import router as records_router
from .settings import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Carbon Footprint API",
    version="0.3.0",
    description="Estimates CO₂e for commute, electricity and food activities and aggregates them for charts.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidQuantity)
@app.exception_handler(UnknownCategory)
async def rejected_input(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"success": False, "error": exc.code, "detail": str(exc)},
    )


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Carbon Footprint API is running!"


@app.get("/api/health")
async def health():
    return {"status": "ok", "message": "API is operational"}


app.include_router(estimate_router)
app.include_router(records_router)
app.include_router(aggregate_router)
app.include_router(offsets_router)


if settings.estimator_provider == "climatiq":
    credential = settings.climatiq_api_key
elif settings.estimator_provider == "gemini":
    credential = settings.gemini_api_key
else:
    credential = None
logger.info(
    "Estimator provider: %s (credential loaded: %s)",
    settings.estimator_provider,
    "yes" if credential else "no",
)
