import pytest

import consola
from distancia import PuntoCondado
from registro import configurar_registro


def _guion(*lineas):
    pendientes = list(lineas)

    def entrada(_prompt):
        if not pendientes:
            raise EOFError
        return pendientes.pop(0)

    return entrada


def test_leer_consulta():
    q = consola.leer_consulta(" 40.7, -74.0 ")
    assert (q.latitud, q.longitud) == (40.7, -74.0)


@pytest.mark.parametrize("texto", ["", "40.7", "a b", "1 2 3", "91 0", "0 181"])
def test_leer_consulta_rechaza(texto):
    with pytest.raises(ValueError):
        consola.leer_consulta(texto)


def test_ejecutar_muestra_ambas_estrategias(puntos_condados):
    salida = []
    resueltas = consola.ejecutar(puntos_condados, 1, 2, entrada=_guion("hola", "40.78 -73.97", "34 -118"),
                                 salida=salida.append)
    assert resueltas == 2
    texto = "\n".join(salida)
    assert "Entrada inválida" in texto
    assert "K-D Tree:" in texto
    assert "Fuerza bruta:" in texto
    assert "(NY, New York)" in texto
    assert "(CA, Los Angeles)" in texto
    assert "AVISO" not in texto


def test_ejecutar_termina_con_eof(puntos_condados):
    salida = []
    assert consola.ejecutar(puntos_condados, 2, 3, entrada=_guion("40 -74"), salida=salida.append) == 1


def test_main(tmp_path, monkeypatch, capsys):
    datos = tmp_path / "datos.txt"
    datos.write_text("NY New York 40.7769 -73.9710\nTX Harris 29.8577 -95.3936\n", encoding="utf-8")
    log = tmp_path / "logs" / "vecinos.log"
    monkeypatch.setattr(consola, "configurar_registro", lambda: configurar_registro(archivo=str(log)))
    monkeypatch.setattr("builtins.input", _guion("30 -95"))

    assert consola.main([str(datos), "-k", "1", "-n", "1"]) == 0
    assert "(TX, Harris)" in capsys.readouterr().out


def test_main_datos_malformados(tmp_path, monkeypatch):
    datos = tmp_path / "datos.txt"
    datos.write_text("NY New York norte -73.9710\n", encoding="utf-8")
    log = tmp_path / "vecinos.log"
    monkeypatch.setattr(consola, "configurar_registro", lambda: configurar_registro(archivo=str(log)))
    assert consola.main([str(datos)]) == 1
    assert consola.main([str(tmp_path / "no_existe.txt")]) == 1


def test_main_k_invalido(tmp_path, monkeypatch):
    monkeypatch.setattr(consola, "configurar_registro", lambda: configurar_registro(archivo=str(tmp_path / "v.log")))
    with pytest.raises(SystemExit):
        consola.main([str(tmp_path / "x.txt"), "-k", "0"])


def test_formatear():
    puntos = [PuntoCondado("CA", "San Luis Obispo", 35.4, -120.4), PuntoCondado("TX", "Travis", 30.3, -97.8)]
    assert consola.formatear(puntos) == "(CA, San Luis Obispo)  (TX, Travis)"
