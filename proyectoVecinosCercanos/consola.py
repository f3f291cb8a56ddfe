"""
Modo consola: pide coordenadas, construye el KD-Tree y compara
contra la búsqueda lineal mostrando tiempos y resultados.
"""
import argparse
import logging
import sys

import config
from carga_datos import cargar_puntos
from comparador import comparar_consulta, medir_construccion
from distancia import punto_consulta
from errores import ErrorVecinos
from registro import configurar_registro

logger = logging.getLogger("vecinos.consola")


def leer_consulta(texto: str):
    partes = texto.replace(",", " ").split()
    if len(partes) != 2:
        raise ValueError("introduce exactamente dos números: latitud longitud")
    lat, lon = float(partes[0]), float(partes[1])
    if not -90.0 <= lat <= 90.0 or not -180.0 <= lon <= 180.0:
        raise ValueError(f"coordenadas fuera de rango: ({lat}, {lon})")
    return punto_consulta(lat, lon)


def formatear(puntos) -> str:
    return "  ".join(f"({p.estado}, {p.condado})" for p in puntos)


def ejecutar(puntos, k: int, consultas: int, entrada=input, salida=print) -> int:
    """Bucle interactivo; devuelve cuántas consultas se resolvieron."""
    salida(f"K={k}")
    resueltas = 0
    while resueltas < consultas:
        try:
            texto = entrada("Introduce latitud y longitud: ")
        except EOFError:
            break
        try:
            consulta = leer_consulta(texto)
        except ValueError as e:
            logger.warning("Entrada rechazada %r: %s", texto, e)
            salida(f"Entrada inválida: {e}")
            continue

        arbol, t_build = medir_construccion(puntos)
        r = comparar_consulta(arbol, puntos, consulta, k)

        salida("K-D Tree:")
        salida(f"Tiempo de construcción: {t_build:.6f} s")
        salida(f"Tiempo de consulta: {r.tiempo_kd:.6f} s ({r.nodos_visitados} nodos visitados)")
        salida(formatear(p for _, p in r.kd))
        salida("Fuerza bruta:")
        salida(f"Tiempo de consulta: {r.tiempo_lineal:.6f} s")
        salida(formatear(p for _, p in r.lineal))
        if not r.coinciden:
            salida("AVISO: los resultados no coinciden")
        resueltas += 1
    return resueltas


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="k vecinos más cercanos: KD-Tree vs búsqueda lineal")
    parser.add_argument("datos", nargs="?", default=config.DATA_LOCAL_PATH, help="archivo de condados")
    parser.add_argument("-k", type=int, default=config.K_POR_DEFECTO, help="número de vecinos")
    parser.add_argument("-n", "--consultas", type=int, default=config.CONSULTAS_CONSOLA,
                        help="número de consultas antes de salir")
    args = parser.parse_args(argv)

    configurar_registro()
    if args.k <= 0:
        parser.error("k debe ser mayor que 0")

    try:
        puntos = cargar_puntos(args.datos)
    except (OSError, ErrorVecinos) as e:
        logger.error("No se pudieron cargar los datos de %s: %s", args.datos, e)
        return 1

    ejecutar(puntos, args.k, args.consultas)
    return 0


if __name__ == "__main__":
    sys.exit(main())
