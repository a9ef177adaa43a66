from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn
import logging

from config import settings, configure_logging

from routes import (
    owners_router,
    owner_pets_router,
    pets_router,
    pet_types_router,
    pet_visits_router,
    visits_router,
    pet_vaccinations_router,
    vets_router,
    specialties_router,
    appointments_router,
)
from core.error_handlers import register_exception_handlers
from database.db import create_tables, get_database_url
from models.common import HealthCheckResponse

logger = logging.getLogger(__name__)

# Configurar logging una sola vez al inicio
configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Maneja el ciclo de vida de la aplicación."""
    # Startup
    logger.info(f"Base de datos: {get_database_url()}")
    try:
        create_tables()
    except Exception as e:
        logger.warning(f"No se pudieron crear tablas en la base de datos: {e}")
    yield
    # Shutdown

app = FastAPI(
    title=settings.app_name,
    description="Gestión de una clínica veterinaria: propietarios, mascotas, veterinarios, visitas, vacunas y citas.",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    debug=settings.debug_mode
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)

register_exception_handlers(app)

@app.get("/")
async def root():
    """Endpoint raíz con información de la API."""
    return {
        "message": f"{settings.app_name} - Pet Clinic",
        "version": settings.app_version,
        "status": "active",
        "environment": "production" if settings.is_production else "development",
        "apiPrefix": settings.api_prefix,
        "docs": "/docs",
        "redoc": "/redoc"
    }

app.include_router(owners_router)
app.include_router(owner_pets_router)
app.include_router(pet_visits_router)        # /owners/{id}/pets/{id}/visits
app.include_router(pet_vaccinations_router)  # /owners/{id}/pets/{id}/vaccinations
app.include_router(pets_router)
app.include_router(pet_types_router)
app.include_router(visits_router)
app.include_router(vets_router)
app.include_router(specialties_router)
app.include_router(appointments_router)

@app.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Health check endpoint con verificación de base de datos."""
    from database.db import engine
    from sqlalchemy import text
    
    db_status = "unknown"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Health check: Error de conexión a BD: {e}")
        db_status = "disconnected"
    
    return HealthCheckResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        service=settings.app_name,
        version=settings.app_version,
        database=db_status,
        environment="production" if settings.is_production else "development",
    )

if __name__ == "__main__":
    uvicorn.run(
        app, 
        host="0.0.0.0", 
        port=8000,
        log_level=settings.log_level.lower()
    )
