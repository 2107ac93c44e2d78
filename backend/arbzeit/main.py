from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from arbzeit.core.config import settings
from arbzeit.core.logging import configure_logging
from arbzeit.api.v1.compliance import router as compliance_router
from arbzeit.api.v1.time_tracking import router as time_tracking_router

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)
    yield


app = FastAPI(
    title="ArbZeit API",
    description="Arbeitszeiterfassung & ArbZG-Prüfung",
    version=VERSION,
    lifespan=lifespan,
    # Swagger UI nur in Entwicklung – in Produktion DEBUG=false setzen
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/v1"

app.include_router(compliance_router, prefix=API_PREFIX)
app.include_router(time_tracking_router, prefix=API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "ArbZeit API", "version": VERSION}
