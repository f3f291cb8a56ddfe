import math

import pytest

from distancia import (
    RADIO_TIERRA_KM,
    PuntoCondado,
    cota_latitud_km,
    cota_longitud_km,
    distancia_km,
    punto_consulta,
)

UN_GRADO_KM = RADIO_TIERRA_KM * math.pi / 180


def test_distancia_a_si_mismo_es_cero(puntos_condados):
    for p in puntos_condados:
        assert distancia_km(p, p) == 0.0


def test_distancia_simetrica(puntos_condados):
    for a in puntos_condados:
        for b in puntos_condados:
            assert distancia_km(a, b) == distancia_km(b, a)


def test_un_grado_de_latitud():
    assert distancia_km(punto_consulta(0, 0), punto_consulta(1, 0)) == pytest.approx(UN_GRADO_KM)


def test_longitud_escalada_por_coseno_de_latitud_media():
    d = distancia_km(punto_consulta(60, 10), punto_consulta(60, 11))
    assert d == pytest.approx(UN_GRADO_KM * 0.5)


def test_orden_relativo_entre_condados(puntos_condados):
    manhattan, brooklyn = puntos_condados[2], puntos_condados[3]
    los_angeles = puntos_condados[0]
    assert distancia_km(manhattan, brooklyn) < 20
    assert distancia_km(manhattan, brooklyn) < distancia_km(manhattan, los_angeles)


def test_etiquetas_no_afectan_la_distancia():
    a = PuntoCondado("X", "Uno", 10.0, 20.0)
    b = PuntoCondado("Y", "Dos palabras", 10.0, 20.0)
    assert distancia_km(a, b) == 0.0


def test_punto_consulta_usa_etiquetas_fijas():
    q = punto_consulta("12.5", 3)
    assert q == PuntoCondado("x", "y", 12.5, 3.0)
    assert q.coordenada(0) == 12.5
    assert q.coordenada(1) == 3.0


def test_cota_latitud_es_cota_inferior():
    q = punto_consulta(40.0, -100.0)
    for lat in (41.0, 45.0, 60.0):
        for lon in (-130.0, -100.0, -70.0):
            assert cota_latitud_km(lat - q.latitud) <= distancia_km(q, punto_consulta(lat, lon))


def test_cota_longitud_es_cota_inferior_en_el_rango_de_latitudes():
    q = punto_consulta(30.0, -100.0)
    lat_min, lat_max = 20.0, 80.0
    cota = cota_longitud_km(5.0, q.latitud, lat_min, lat_max)
    for lat in (20.0, 35.0, 50.0, 65.0, 80.0):
        for delta in (5.0, 8.0):
            assert cota <= distancia_km(q, punto_consulta(lat, q.longitud + delta))
    # con latitud 80 la cota debe ser menor que la de latitud 30
    assert cota < cota_longitud_km(5.0, q.latitud, 30.0, 30.0)


def test_cota_longitud_nula_si_la_latitud_media_sale_de_rango():
    # latitud media 150: el coseno cambia de signo dentro del intervalo
    assert cota_longitud_km(10.0, 100.0, 0.0, 200.0) == 0.0
    assert cota_longitud_km(10.0, -100.0, -200.0, 0.0) == 0.0


def test_cota_longitud_es_cota_inferior_con_latitudes_grandes():
    q = punto_consulta(120.0, 0.0)
    cota = cota_longitud_km(3.0, q.latitud, -300.0, 300.0)
    for lat in (-300.0, -60.0, 60.0, 240.0):
        assert cota <= distancia_km(q, punto_consulta(lat, 3.0))
