"""
Funciones de utilidad generales.
"""

from typing import Any, Iterable, List
from enum import Enum as PyEnum


def enum_to_value(value: Any) -> Any:
    """
    Convierte un Enum a su valor, o devuelve el valor sin cambios.
    
    Args:
        value: Valor a convertir
        
    Returns:
        Enum.value si value es un Enum, de lo contrario el valor sin cambios
    """
    if isinstance(value, PyEnum):
        return value.value
    return value


def unique_in_order(values: Iterable[Any]) -> List[Any]:
    """Elimina duplicados conservando el orden de primera aparición."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result
