# Punto geográfico (estado, condado, lat, lon) y la métrica compartida
# por el KD-Tree y la búsqueda lineal.
from typing import NamedTuple
import math

RADIO_TIERRA_KM = 6371.0


# -------------------------------
# Punto
# -------------------------------
class PuntoCondado(NamedTuple):
    estado: str
    condado: str
    latitud: float
    longitud: float

    def coordenada(self, eje: int) -> float:
        """0 = latitud, 1 = longitud (mismo orden que los ejes del árbol)."""
        return self.latitud if eje == 0 else self.longitud


def punto_consulta(latitud: float, longitud: float) -> PuntoCondado:
    """Punto sin etiquetas, usado para consultas."""
    return PuntoCondado("x", "y", float(latitud), float(longitud))


# -------------------------------
# Distancia (aproximación plana)
# -------------------------------
def distancia_km(a: PuntoCondado, b: PuntoCondado) -> float:
    """
    Proyección equirectangular: el delta de longitud se escala por el
    coseno de la latitud media. Simétrica y d(a, a) == 0.
    Solo sirve para ordenar vecinos, no para reportar distancias exactas.
    """
    lat_media = math.radians((a.latitud + b.latitud) / 2)
    x = math.radians(b.longitud - a.longitud) * math.cos(lat_media)
    y = math.radians(b.latitud - a.latitud)
    return RADIO_TIERRA_KM * math.hypot(x, y)


def cota_latitud_km(delta_lat: float) -> float:
    """Distancia mínima a cualquier punto separado delta_lat grados en latitud."""
    return RADIO_TIERRA_KM * abs(math.radians(delta_lat))


def cota_longitud_km(delta_lon: float, lat_consulta: float, lat_min: float, lat_max: float) -> float:
    """
    Distancia mínima a cualquier punto separado al menos delta_lon grados en
    longitud cuya latitud esté en [lat_min, lat_max].
    En [-90, 90] el coseno es máximo en 0 y decrece con |x|, así que el
    mínimo sobre el intervalo de latitudes medias está en uno de sus extremos.
    Si el intervalo sale de [-90, 90] el coseno puede anularse: cota 0.
    """
    media_min = (lat_consulta + lat_min) / 2
    media_max = (lat_consulta + lat_max) / 2
    if media_min < -90.0 or media_max > 90.0:
        return 0.0
    cos_min = min(
        math.cos(math.radians(media_min)),
        math.cos(math.radians(media_max)),
    )
    return RADIO_TIERRA_KM * abs(math.radians(delta_lon)) * max(cos_min, 0.0)
