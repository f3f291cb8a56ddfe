from comparador import (
    CAJA_EEUU,
    comparar_consulta,
    comparativa_aleatoria,
    medir_construccion,
    puntos_aleatorios,
)
from distancia import punto_consulta


def test_puntos_aleatorios_deterministas():
    a = puntos_aleatorios(50, semilla=3)
    assert a == puntos_aleatorios(50, semilla=3)
    assert a != puntos_aleatorios(50, semilla=4)
    assert all(CAJA_EEUU[0] <= p.latitud <= CAJA_EEUU[1] for p in a)
    assert all(CAJA_EEUU[2] <= p.longitud <= CAJA_EEUU[3] for p in a)


def test_medir_construccion(puntos_condados):
    arbol, segundos = medir_construccion(puntos_condados)
    assert len(arbol) == len(puntos_condados)
    assert segundos >= 0


def test_comparar_consulta(puntos_condados):
    arbol, _ = medir_construccion(puntos_condados)
    r = comparar_consulta(arbol, puntos_condados, punto_consulta(41.0, -88.0), 3)
    assert r.coinciden
    assert r.kd[0][1].condado == "Cook"
    assert r.puntos_recorridos == len(puntos_condados)
    assert 1 <= r.nodos_visitados <= len(puntos_condados)

    filas = r.filas()
    assert len(filas) == 6
    assert {f["estructura"] for f in filas} == {"KD-Tree", "Lineal"}
    assert [f["rango"] for f in filas[:3]] == [1, 2, 3]


def test_comparativa_aleatoria_coincide_siempre():
    puntos = puntos_aleatorios(3000, semilla=11)
    df = comparativa_aleatoria(puntos, 40, 5, semilla=2)
    assert len(df) == 40
    assert df["coinciden"].all()
    assert (df["nodos_visitados"] < len(puntos)).all()


def test_comparativa_sin_consultas(puntos_condados):
    df = comparativa_aleatoria(puntos_condados, 0, 1, semilla=0)
    assert df.empty
    assert "tiempo_kd_s" in df.columns
