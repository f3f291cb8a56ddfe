import pytest

from comparador import puntos_aleatorios
from distancia import PuntoCondado


@pytest.fixture()
def puntos_cuadrado():
    return [
        PuntoCondado("A", "Origen", 0.0, 0.0),
        PuntoCondado("A", "Noreste", 1.0, 1.0),
        PuntoCondado("A", "Lejos", 5.0, 5.0),
        PuntoCondado("A", "Suroeste", -1.0, -1.0),
    ]


@pytest.fixture()
def puntos_condados():
    return [
        PuntoCondado("CA", "Los Angeles", 34.3208, -118.2247),
        PuntoCondado("CA", "San Francisco", 37.7566, -122.4421),
        PuntoCondado("NY", "New York", 40.7769, -73.9710),
        PuntoCondado("NY", "Kings", 40.6395, -73.9385),
        PuntoCondado("TX", "Harris", 29.8577, -95.3936),
        PuntoCondado("IL", "Cook", 41.8401, -87.8169),
        PuntoCondado("WA", "King", 47.4932, -121.8328),
    ]


@pytest.fixture(scope="session")
def diez_mil_puntos():
    return puntos_aleatorios(10_000, semilla=1234)
