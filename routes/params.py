"""
Parámetros de ruta compartidos por los routers.
"""

from typing import Annotated

from fastapi import Path

from models.common import ID_MIN, ID_MAX

# Identificador en la ruta; fuera de rango es un 400 antes de llegar a la base de datos
IdPath = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]
