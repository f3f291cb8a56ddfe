# Búsqueda lineal (fuerza bruta): referencia de corrección para el KD-Tree.
from typing import List, Sequence, Tuple
import time

from candidatos import ColaCandidatos
from distancia import PuntoCondado, distancia_km


def k_vecinos_lineal_con_distancias(puntos: Sequence[PuntoCondado], consulta: PuntoCondado,
                                    k: int) -> List[Tuple[float, PuntoCondado]]:
    cola = ColaCandidatos(k)
    for indice, p in enumerate(puntos):
        cola.ofrecer(distancia_km(consulta, p), indice, p)
    return cola.vaciar_ordenado()


def k_vecinos_lineal(puntos: Sequence[PuntoCondado], consulta: PuntoCondado, k: int) -> List[PuntoCondado]:
    """
    Recorre todos los puntos una vez, en orden de entrada. O(n log k).
    Retorna hasta k puntos ordenados de más cercano a más lejano.
    """
    return [p for _, p in k_vecinos_lineal_con_distancias(puntos, consulta, k)]


def vecino_mas_cercano_lineal(puntos: Sequence[PuntoCondado], consulta: PuntoCondado):
    """
    Retorna:
      (mejor_punto, distancia_km, puntos_visitados, tiempo)
    """
    inicio = time.perf_counter()
    res = k_vecinos_lineal_con_distancias(puntos, consulta, 1)
    duracion = time.perf_counter() - inicio
    if not res:
        return None, None, 0, duracion
    d, p = res[0]
    return p, d, len(puntos), duracion
