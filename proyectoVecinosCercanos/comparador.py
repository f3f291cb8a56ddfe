"""
Comparativa KD-Tree vs búsqueda lineal: tiempos, nodos visitados y
verificación de que ambos devuelven los mismos vecinos.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging
import random
import time

import pandas as pd

from busqueda_lineal import k_vecinos_lineal_con_distancias
from distancia import PuntoCondado, punto_consulta
from kd_tree_module import KDTree

logger = logging.getLogger("vecinos.comparador")

# Territorio continental de EE.UU. (min_lat, max_lat, min_lon, max_lon)
CAJA_EEUU = (24.5, 49.5, -125.0, -66.9)


@dataclass
class ResultadoComparacion:
    consulta: PuntoCondado
    k: int
    kd: List[Tuple[float, PuntoCondado]] = field(default_factory=list)
    lineal: List[Tuple[float, PuntoCondado]] = field(default_factory=list)
    tiempo_kd: float = 0.0
    tiempo_lineal: float = 0.0
    nodos_visitados: int = 0
    puntos_recorridos: int = 0

    @property
    def coinciden(self) -> bool:
        return [p for _, p in self.kd] == [p for _, p in self.lineal]

    def filas(self) -> List[dict]:
        """Una fila por vecino y estrategia, para mostrar como tabla."""
        out = []
        for estructura, lista in (("KD-Tree", self.kd), ("Lineal", self.lineal)):
            for rango, (d, p) in enumerate(lista, start=1):
                out.append({
                    "estructura": estructura,
                    "rango": rango,
                    "estado": p.estado,
                    "condado": p.condado,
                    "latitud": p.latitud,
                    "longitud": p.longitud,
                    "dist_km": d,
                })
        return out


def medir_construccion(puntos: Sequence[PuntoCondado]) -> Tuple[KDTree, float]:
    t0 = time.perf_counter()
    arbol = KDTree().construir(puntos)
    duracion = time.perf_counter() - t0
    logger.info("Construcción KD-Tree: %d puntos, %.6f s, altura %d", len(arbol), duracion, arbol.altura())
    return arbol, duracion


def comparar_consulta(arbol: KDTree, puntos: Sequence[PuntoCondado], consulta: PuntoCondado,
                      k: int) -> ResultadoComparacion:
    kd, nodos_v, t_kd = arbol.k_vecinos_con_estadisticas(consulta, k)

    t0 = time.perf_counter()
    lineal = k_vecinos_lineal_con_distancias(puntos, consulta, k)
    t_lineal = time.perf_counter() - t0

    res = ResultadoComparacion(
        consulta=consulta,
        k=k,
        kd=kd,
        lineal=lineal,
        tiempo_kd=t_kd,
        tiempo_lineal=t_lineal,
        nodos_visitados=nodos_v,
        puntos_recorridos=len(puntos),
    )
    if not res.coinciden:
        logger.warning("KD-Tree y búsqueda lineal difieren para (%.6f, %.6f) k=%d",
                       consulta.latitud, consulta.longitud, k)
    return res


def puntos_aleatorios(n: int, semilla: Optional[int] = None, caja=CAJA_EEUU) -> List[PuntoCondado]:
    """n puntos uniformes dentro de la caja, etiquetados P<i>."""
    rnd = random.Random(semilla)
    min_lat, max_lat, min_lon, max_lon = caja
    return [
        PuntoCondado("P", str(i), rnd.uniform(min_lat, max_lat), rnd.uniform(min_lon, max_lon))
        for i in range(n)
    ]


def comparativa_aleatoria(puntos: Sequence[PuntoCondado], n_consultas: int, k: int,
                          semilla: Optional[int] = None, arbol: Optional[KDTree] = None) -> pd.DataFrame:
    """Lanza n_consultas aleatorias dentro de la caja de los datos y resume cada una."""
    if arbol is None:
        arbol, _ = medir_construccion(puntos)

    rnd = random.Random(semilla)
    if puntos:
        lats = [p.latitud for p in puntos]
        lons = [p.longitud for p in puntos]
        caja = (min(lats), max(lats), min(lons), max(lons))
    else:
        caja = CAJA_EEUU

    filas = []
    for i in range(n_consultas):
        consulta = punto_consulta(rnd.uniform(caja[0], caja[1]), rnd.uniform(caja[2], caja[3]))
        r = comparar_consulta(arbol, puntos, consulta, k)
        filas.append({
            "consulta": i,
            "latitud": consulta.latitud,
            "longitud": consulta.longitud,
            "tiempo_kd_s": r.tiempo_kd,
            "tiempo_lineal_s": r.tiempo_lineal,
            "nodos_visitados": r.nodos_visitados,
            "coinciden": r.coinciden,
        })

    df = pd.DataFrame(filas, columns=["consulta", "latitud", "longitud", "tiempo_kd_s",
                                      "tiempo_lineal_s", "nodos_visitados", "coinciden"])
    if n_consultas:
        logger.info("Comparativa: %d consultas, k=%d, %d coincidencias", n_consultas, k, int(df["coinciden"].sum()))
    return df
