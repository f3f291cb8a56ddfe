"""
Configuración del proyecto: rutas y valores por defecto.
Cada valor se puede sobreescribir con una variable de entorno VECINOS_*.
"""
import os
import sys

from errores import ArgumentoInvalido

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _entero_entorno(nombre: str, defecto: int, minimo: int = 1) -> int:
    crudo = os.environ.get(nombre)
    if crudo is None or not crudo.strip():
        return defecto
    try:
        valor = int(crudo)
    except ValueError:
        raise ArgumentoInvalido(f"{nombre} debe ser un entero, no {crudo!r}") from None
    if valor < minimo:
        raise ArgumentoInvalido(f"{nombre} debe ser >= {minimo} (valor={valor})")
    return valor


# Dataset incluido (estado condado... latitud longitud): junto a los módulos en
# una instalación editable, en <prefix>/share/vecinos-cercanos si no
DATA_INSTALADO_PATH = os.path.join(sys.prefix, "share", "vecinos-cercanos", "condados.txt")
_DATA_JUNTO_PATH = os.path.join(BASE_DIR, "data", "condados.txt")
DATA_LOCAL_PATH = os.environ.get("VECINOS_DATOS") or (
    _DATA_JUNTO_PATH if os.path.exists(_DATA_JUNTO_PATH) else DATA_INSTALADO_PATH
)

LOG_DIR = os.environ.get("VECINOS_LOG_DIR") or os.path.join(BASE_DIR, "logs")
LOG_LEVEL = os.environ.get("VECINOS_LOG_LEVEL", "INFO").upper()

# k por defecto y número de consultas del modo consola
K_POR_DEFECTO = _entero_entorno("VECINOS_K", 1)
CONSULTAS_CONSOLA = _entero_entorno("VECINOS_CONSULTAS", 3)

# Comparativa aleatoria del explorador
CONSULTAS_ALEATORIAS = 100
