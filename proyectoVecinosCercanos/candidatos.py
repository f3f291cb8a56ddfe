"""
Cola acotada de candidatos para las búsquedas k-NN.

Montículo de máximos (heapq con claves negadas) de tamaño <= k. La clave es
(distancia, índice de entrada): entre puntos equidistantes gana el que
aparece primero en la colección original, así el KD-Tree y la búsqueda
lineal devuelven exactamente la misma lista.
"""
from typing import List, Tuple
import heapq

from distancia import PuntoCondado
from errores import ArgumentoInvalido


def validar_k(k) -> int:
    # bool es subclase de int
    if isinstance(k, bool) or not isinstance(k, int):
        raise ArgumentoInvalido(f"k debe ser un entero, no {k!r}")
    if k <= 0:
        raise ArgumentoInvalido(f"k debe ser mayor que 0 (k={k})")
    return k


class ColaCandidatos:
    __slots__ = ("k", "_heap")

    def __init__(self, k: int):
        self.k = validar_k(k)
        # (-distancia, -indice, punto)
        self._heap: List[Tuple[float, int, PuntoCondado]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def llena(self) -> bool:
        return len(self._heap) >= self.k

    def peor_distancia(self) -> float:
        """Distancia del peor candidato; infinito mientras la cola no esté llena."""
        if not self.llena():
            return float("inf")
        return -self._heap[0][0]

    def ofrecer(self, distancia: float, indice: int, punto: PuntoCondado) -> bool:
        """Acepta si hay hueco o si mejora estrictamente al peor candidato."""
        entrada = (-distancia, -indice, punto)
        if len(self._heap) < self.k:
            heapq.heappush(self._heap, entrada)
            return True
        peor_d, peor_i = -self._heap[0][0], -self._heap[0][1]
        if (distancia, indice) < (peor_d, peor_i):
            heapq.heapreplace(self._heap, entrada)
            return True
        return False

    def vaciar_ordenado(self) -> List[Tuple[float, PuntoCondado]]:
        """Devuelve (distancia, punto) de menor a mayor y deja la cola vacía."""
        salida = []
        while self._heap:
            d, _, p = heapq.heappop(self._heap)
            salida.append((-d, p))
        salida.reverse()
        return salida
