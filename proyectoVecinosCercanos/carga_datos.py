"""
Carga de puntos desde el formato de texto:

    <estado> <condado (una o más palabras)> <latitud> <longitud>

Las líneas vacías y las que empiezan con '#' se ignoran. Una línea inválida
lanza RegistroMalformado; nunca se devuelve un punto a medias.
"""
from typing import Iterable, List
import logging
import math

import pandas as pd

from distancia import PuntoCondado
from errores import RegistroMalformado

logger = logging.getLogger("vecinos.carga")

COLUMNAS = ["estado", "condado", "latitud", "longitud"]


def _coordenada(token: str, nombre: str, limite: float, numero_linea: int, linea: str) -> float:
    try:
        valor = float(token)
    except ValueError:
        raise RegistroMalformado(numero_linea, linea, f"{nombre} no numérica: {token!r}") from None
    if not math.isfinite(valor):
        raise RegistroMalformado(numero_linea, linea, f"{nombre} no finita: {token!r}")
    if abs(valor) > limite:
        raise RegistroMalformado(numero_linea, linea, f"{nombre} fuera de rango: {valor}")
    return valor


def parsear_linea(linea: str, numero_linea: int = 1) -> PuntoCondado:
    tokens = linea.split()
    if len(tokens) < 4:
        raise RegistroMalformado(numero_linea, linea, f"se esperaban al menos 4 campos, hay {len(tokens)}")
    latitud = _coordenada(tokens[-2], "latitud", 90.0, numero_linea, linea)
    longitud = _coordenada(tokens[-1], "longitud", 180.0, numero_linea, linea)
    return PuntoCondado(tokens[0], " ".join(tokens[1:-2]), latitud, longitud)


def parsear_lineas(lineas: Iterable[str]) -> List[PuntoCondado]:
    puntos = []
    for numero, linea in enumerate(lineas, start=1):
        limpia = linea.strip()
        if not limpia or limpia.startswith("#"):
            continue
        puntos.append(parsear_linea(limpia, numero))
    return puntos


def cargar_puntos(ruta: str) -> List[PuntoCondado]:
    with open(ruta, "r", encoding="utf-8") as f:
        puntos = parsear_lineas(f)
    logger.info("Cargados %d puntos desde %s", len(puntos), ruta)
    return puntos


# -------------------------------
# Conversión a/desde DataFrame
# -------------------------------
def puntos_a_dataframe(puntos: Iterable[PuntoCondado]) -> pd.DataFrame:
    return pd.DataFrame([p._asdict() for p in puntos], columns=COLUMNAS)


def dataframe_a_puntos(df: pd.DataFrame) -> List[PuntoCondado]:
    """
    Acepta columnas estado, condado, latitud, longitud (sin importar mayúsculas).
    Las coordenadas no numéricas se rechazan igual que en el archivo de texto.
    """
    df = df.rename(columns=lambda c: str(c).lower().strip())
    faltan = [c for c in COLUMNAS if c not in df.columns]
    if faltan:
        raise RegistroMalformado(0, ",".join(map(str, df.columns)), f"faltan columnas: {', '.join(faltan)}")

    puntos = []
    for numero, fila in enumerate(df[COLUMNAS].itertuples(index=False), start=1):
        linea = f"{fila.estado} {fila.condado} {fila.latitud} {fila.longitud}"
        latitud = _coordenada(str(fila.latitud), "latitud", 90.0, numero, linea)
        longitud = _coordenada(str(fila.longitud), "longitud", 180.0, numero, linea)
        puntos.append(PuntoCondado(str(fila.estado).strip(), str(fila.condado).strip(), latitud, longitud))
    return puntos
