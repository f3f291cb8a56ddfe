#KD-Tree clásico (2D) sobre (latitud, longitud) para k vecinos más cercanos.
from typing import List, Tuple, Optional, Sequence
import logging
import math
import time

from candidatos import ColaCandidatos
from errores import ArgumentoInvalido
from distancia import PuntoCondado, distancia_km, cota_latitud_km, cota_longitud_km

logger = logging.getLogger("vecinos.kd_tree")

# -------------------------------
# Alias de tipos
# -------------------------------
Caja = Tuple[float, float, float, float]   # (min_lat, max_lat, min_lon, max_lon)

EJE_LATITUD = 0
EJE_LONGITUD = 1

# Margen de redondeo sobre las cotas de poda (nunca debe descartar un empate)
_HOLGURA = 1.0 - 1e-9


# ============================================================
# NODO KD
# ============================================================
class NodoKD:
    __slots__ = ("punto", "indice", "izq", "der", "eje")

    def __init__(self, punto: PuntoCondado, indice: int, eje: int):
        self.punto: PuntoCondado = punto
        self.indice: int = indice            # posición en la colección de entrada
        self.izq: Optional["NodoKD"] = None
        self.der: Optional["NodoKD"] = None
        self.eje: int = eje   # 0 = lat, 1 = lon


# ============================================================
# KD-TREE
# ============================================================
class KDTree:
    def __init__(self):
        self.raiz: Optional[NodoKD] = None
        self.tamano: int = 0
        self.lat_min: float = -90.0
        self.lat_max: float = 90.0

    def __len__(self) -> int:
        return self.tamano

    # ----------------------------------------------------------
    # Construcción del árbol
    # ----------------------------------------------------------
    def construir(self, puntos: Sequence[PuntoCondado]) -> "KDTree":
        """
        Construye el árbol a partir de la colección completa.

        No reordena la lista recibida: se ordena una permutación de índices
        por tramos [inicio, fin). El eje depende de la profundidad
        (par = latitud, impar = longitud) y el nodo es el elemento del medio,
        así que el árbol queda balanceado.
        Coordenadas no finitas lanzan ArgumentoInvalido.
        """
        datos = list(puntos)
        for i, p in enumerate(datos):
            if not (math.isfinite(p.latitud) and math.isfinite(p.longitud)):
                raise ArgumentoInvalido(f"punto {i} con coordenadas no finitas: {p!r}")
        orden = list(range(len(datos)))

        def construir_rec(inicio: int, fin: int, profundidad: int) -> Optional[NodoKD]:
            if inicio >= fin:
                return None

            eje = profundidad % 2
            orden[inicio:fin] = sorted(orden[inicio:fin], key=lambda i: datos[i].coordenada(eje))
            mid = (inicio + fin) // 2

            nodo = NodoKD(datos[orden[mid]], orden[mid], eje)
            nodo.izq = construir_rec(inicio, mid, profundidad + 1)
            nodo.der = construir_rec(mid + 1, fin, profundidad + 1)
            return nodo

        t0 = time.perf_counter()
        self.raiz = construir_rec(0, len(datos), 0)
        self.tamano = len(datos)
        # rango real de latitudes: punto de partida de las cotas de poda
        self.lat_min = min((p.latitud for p in datos), default=-90.0)
        self.lat_max = max((p.latitud for p in datos), default=90.0)
        logger.debug("KD-Tree construido: %d puntos en %.6f s", self.tamano, time.perf_counter() - t0)
        return self

    # ----------------------------------------------------------
    # k vecinos más cercanos
    # ----------------------------------------------------------
    def _buscar(self, consulta: PuntoCondado, k: int) -> Tuple[List[Tuple[float, PuntoCondado]], int]:
        cola = ColaCandidatos(k)
        if self.raiz is None:
            return [], 0

        nodos_vis = 0

        def buscar(nodo: Optional[NodoKD], lat_min: float, lat_max: float):
            nonlocal nodos_vis

            if nodo is None:
                return

            nodos_vis += 1
            cola.ofrecer(distancia_km(consulta, nodo.punto), nodo.indice, nodo.punto)

            eje = nodo.eje
            qcoord = consulta.coordenada(eje)
            ncoord = nodo.punto.coordenada(eje)

            # Rango de latitudes de cada hijo
            if eje == EJE_LATITUD:
                rango_izq, rango_der = (lat_min, ncoord), (ncoord, lat_max)
            else:
                rango_izq = rango_der = (lat_min, lat_max)

            # Elegir rama principal con el eje del propio nodo
            if qcoord < ncoord:
                primero, rango1, segundo, rango2 = nodo.izq, rango_izq, nodo.der, rango_der
            else:
                primero, rango1, segundo, rango2 = nodo.der, rango_der, nodo.izq, rango_izq

            if primero:
                buscar(primero, *rango1)

            if segundo is None:
                return

            # Decidir si visitar la otra rama: cota por el eje de división
            delta = abs(qcoord - ncoord)
            if eje == EJE_LATITUD:
                cota = cota_latitud_km(delta)
            else:
                cota = cota_longitud_km(delta, consulta.latitud, *rango2)

            if not cola.llena() or cota * _HOLGURA <= cola.peor_distancia():
                buscar(segundo, *rango2)

        buscar(self.raiz, self.lat_min, self.lat_max)
        return cola.vaciar_ordenado(), nodos_vis

    def k_vecinos_mas_cercanos(self, consulta: PuntoCondado, k: int) -> List[PuntoCondado]:
        """Hasta k puntos, del más cercano al más lejano. k <= 0 lanza ArgumentoInvalido."""
        resultado, _ = self._buscar(consulta, k)
        return [p for _, p in resultado]

    def k_vecinos_con_estadisticas(self, consulta: PuntoCondado, k: int):
        """
        Retorna:
          (lista de (distancia_km, punto), nodos_visitados, tiempo)
        """
        inicio = time.perf_counter()
        resultado, nodos_vis = self._buscar(consulta, k)
        return resultado, nodos_vis, time.perf_counter() - inicio

    # ----------------------------------------------------------
    # Vecino más cercano
    # ----------------------------------------------------------
    def vecino_mas_cercano(self, consulta: PuntoCondado):
        """
        Retorna:
          (mejor_punto, distancia_km, nodos_visitados, tiempo)
        """
        resultado, nodos_vis, duracion = self.k_vecinos_con_estadisticas(consulta, 1)
        if not resultado:
            return None, None, nodos_vis, duracion
        d, p = resultado[0]
        return p, d, nodos_vis, duracion

    # ----------------------------------------------------------
    # Consulta por rango
    # ----------------------------------------------------------
    def consulta_rango(self, caja: Caja):
        """
        Caja: (min_lat, max_lat, min_lon, max_lon)
        Retorna: (puntos_en_rango, nodos_visitados, tiempo)
        """
        if self.raiz is None:
            return [], 0, 0.0

        inicio = time.perf_counter()
        nodos_vis = 0
        salida: List[PuntoCondado] = []

        def dentro(pt: PuntoCondado):
            return (
                caja[0] <= pt.latitud <= caja[1] and
                caja[2] <= pt.longitud <= caja[3]
            )

        def rec(nodo: Optional[NodoKD]):
            nonlocal nodos_vis
            if nodo is None:
                return

            nodos_vis += 1

            if dentro(nodo.punto):
                salida.append(nodo.punto)

            if nodo.eje == EJE_LATITUD:
                bajo, alto = caja[0], caja[1]
            else:
                bajo, alto = caja[2], caja[3]
            valor = nodo.punto.coordenada(nodo.eje)

            if nodo.izq and bajo <= valor:
                rec(nodo.izq)
            if nodo.der and alto >= valor:
                rec(nodo.der)

        rec(self.raiz)
        duracion = time.perf_counter() - inicio
        return salida, nodos_vis, duracion

    # ----------------------------------------------------------
    # Todos los puntos / altura
    # ----------------------------------------------------------
    def todos_los_puntos(self) -> List[PuntoCondado]:
        out = []

        def rec(nodo: Optional[NodoKD]):
            if nodo:
                out.append(nodo.punto)
                rec(nodo.izq)
                rec(nodo.der)

        rec(self.raiz)
        return out

    def altura(self) -> int:
        def rec(nodo: Optional[NodoKD]) -> int:
            if nodo is None:
                return 0
            return 1 + max(rec(nodo.izq), rec(nodo.der))

        return rec(self.raiz)
