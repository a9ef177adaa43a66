"""
Utilidades para manejo de fechas y zonas horarias.

Las reglas "en el pasado" / "en el futuro" de las peticiones se evalúan
contra la zona horaria configurada de la aplicación.
"""
from datetime import date, datetime
from zoneinfo import ZoneInfo
from config import settings


def get_local_timezone() -> ZoneInfo:
    """
    Obtiene la zona horaria configurada.
    
    Returns:
        ZoneInfo: Zona horaria de la aplicación.
    """
    return ZoneInfo(settings.timezone)


def get_local_now() -> datetime:
    """
    Obtiene la fecha y hora actual en la zona horaria local configurada.
    
    Returns:
        datetime: Fecha y hora actual con zona horaria.
    """
    return datetime.now(get_local_timezone())


def get_local_today() -> date:
    """Fecha de hoy en la zona horaria local."""
    return get_local_now().date()


def to_naive_local(dt: datetime) -> datetime:
    """
    Convierte un datetime a hora local sin tzinfo.
    
    Los datetime naive se asumen ya expresados en hora local; los que tienen
    zona horaria se convierten a la zona configurada antes de quitarla.
    
    Args:
        dt: Datetime con o sin zona horaria.
    
    Returns:
        datetime: Fecha local naive, comparable con las columnas DateTime.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(get_local_timezone()).replace(tzinfo=None)
