"""
Errores del buscador de vecinos.
Todas las operaciones del núcleo fallan de inmediato con alguno de estos.
"""


class ErrorVecinos(Exception):
    """Base de todos los errores del proyecto."""


class ArgumentoInvalido(ErrorVecinos, ValueError):
    """Parámetro fuera de dominio (k <= 0, k no entero, configuración mal escrita)."""


class RegistroMalformado(ErrorVecinos, ValueError):
    """Línea del archivo de datos que no se puede convertir en un punto."""

    def __init__(self, numero_linea: int, linea: str, motivo: str):
        self.numero_linea = numero_linea
        self.linea = linea
        self.motivo = motivo
        super().__init__(f"línea {numero_linea}: {motivo} ({linea.strip()!r})")
