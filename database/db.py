"""módulo de base de datos con manejo de errores y configuración centralizada."""
from typing import Generator
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

# import ORM classes and Base from models.py
from .models import Base

#import configuration
from config import settings

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine) -> None:
    """SQLite no aplica claves foráneas salvo que se active en cada conexión."""
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str):
    """Crea el engine con las opciones adecuadas para el motor configurado."""
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=settings.debug_mode,
            future=True,
            connect_args={"check_same_thread": False},
        )
        enable_sqlite_foreign_keys(engine)
        return engine
    
    return create_engine(
        database_url,
        echo=settings.debug_mode,
        future=True,
        pool_pre_ping=True,  #verifica conexiones antes de usarlas
        pool_recycle=3600,   #recicla conexiones cada hora
    )


#engine / session con configuración centralizada
engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """dependencia de FastAPI que provee una sesión por petición.
    
    Yields:
        Session: Sesión de SQLAlchemy
        
    Nota:
        - Hace rollback automático si hay excepciones SQLAlchemy
        - Cierra la sesión de forma segura; lo no confirmado se descarta
        - No captura AppException (son errores esperados de negocio)
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Error de base de datos en sesión: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def create_tables() -> None:
    """Crear tablas ORM en la base de datos.
    
    Raises:
        SQLAlchemyError: Si hay error al crear las tablas
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tablas de base de datos creadas/verificadas exitosamente")
    except SQLAlchemyError as e:
        logger.error(f"Error al crear tablas: {e}", exc_info=True)
        raise


def get_database_url() -> str:
    """Obtiene la URL de la base de datos (sin credenciales sensibles)."""
    url = engine.url.render_as_string(hide_password=True)
    if '@' in url:
        return f"***@{url.split('@', 1)[1]}"
    return url
