"""
Explorador de vecinos más cercanos: KD-Tree vs búsqueda lineal.
"""
import streamlit as st
import pandas as pd
import folium
from streamlit_folium import st_folium
import matplotlib.pyplot as plt
import sys, os, io, logging
import colorsys

# Asegurar que los módulos se importen desde la raíz del proyecto
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

import config
from carga_datos import cargar_puntos, parsear_lineas, dataframe_a_puntos, puntos_a_dataframe
from comparador import comparar_consulta, comparativa_aleatoria, medir_construccion
from distancia import punto_consulta
from errores import ErrorVecinos
from registro import configurar_registro

st.set_page_config(layout="wide", page_title="Vecinos más cercanos")

if "registro_configurado" not in st.session_state:
    configurar_registro()
    st.session_state.registro_configurado = True

logger = logging.getLogger("vecinos.app")

# --------------------------
# Inicializar session_state
# --------------------------
if "resultado_nn" not in st.session_state:
    st.session_state.resultado_nn = None  # ResultadoComparacion

if "resultado_rango" not in st.session_state:
    st.session_state.resultado_rango = None  # dict {caja, puntos, nodos, tiempo}

if "comparativa" not in st.session_state:
    st.session_state.comparativa = None  # DataFrame

# --------------------------
# Configuración de la app
# --------------------------
st.title("🌎 Vecinos más cercanos — KD-Tree vs búsqueda lineal")

# --------------------------
# Menú lateral: datos y parámetros
# --------------------------
st.sidebar.title("Datos y parámetros")
modo_carga = st.sidebar.radio("Fuente de datos:", ("Condados incluidos", "Subir archivo"))

puntos = None
try:
    if modo_carga == "Subir archivo":
        archivo = st.sidebar.file_uploader(
            "Sube un .txt (estado condado lat lon) o un CSV (estado, condado, latitud, longitud)",
            type=["txt", "csv"],
        )
        if archivo is not None:
            if archivo.name.lower().endswith(".csv"):
                puntos = dataframe_a_puntos(pd.read_csv(archivo))
            else:
                puntos = parsear_lineas(archivo.getvalue().decode("utf-8").splitlines())
    else:
        puntos = cargar_puntos(config.DATA_LOCAL_PATH)
except (ErrorVecinos, OSError) as e:
    logger.warning("Datos rechazados: %s", e)
    st.error(f"No se pudieron cargar los datos: {e}")
    st.stop()

if not puntos:
    st.warning("Cargue datos (dataset incluido o suba un archivo).")
    st.stop()

df = puntos_a_dataframe(puntos)

st.sidebar.markdown("---")
if len(puntos) > 1:
    k = st.sidebar.slider("k (vecinos)", min_value=1, max_value=min(len(puntos), 50),
                          value=min(config.K_POR_DEFECTO, len(puntos), 50))
else:
    k = 1
vista = st.sidebar.selectbox("Vista:", ("Vecinos más cercanos", "Consulta por rango", "Comparativa aleatoria"))

# vista previa
st.subheader("Vista previa de datos")
st.dataframe(df.head(20))

# Mapa base
lat_centro = float(df["latitud"].mean())
lon_centro = float(df["longitud"].mean())

def crear_mapa_base():
    m = folium.Map(location=[lat_centro, lon_centro], zoom_start=4, control_scale=True)
    for p in puntos:
        folium.CircleMarker(location=[p.latitud, p.longitud], radius=2, color="#3388ff", fill=True,
                            popup=f"{p.estado}, {p.condado}").add_to(m)
    return m

def color_por_rango(i: int, n: int) -> str:
    t = i / max(1, n - 1)  # de 0 a 1
    r, g, b = colorsys.hsv_to_rgb(0.0 + 0.12 * t, 1, 1)
    return "#{:02x}{:02x}{:02x}".format(int(r * 255), int(g * 255), int(b * 255))

# ----- construir KD-Tree -----
kd, tiempo_build = medir_construccion(puntos)

st.subheader("KD-Tree — Métricas")
col1, col2, col3 = st.columns(3)
col1.metric("Puntos", len(kd))
col2.metric("Altura", kd.altura())
col3.metric("Tiempo construcción (s)", f"{tiempo_build:.6f}")

# ==============================
# VECINOS MÁS CERCANOS
# ==============================
if vista == "Vecinos más cercanos":
    st.write("Haz clic en el mapa o introduce coordenadas para buscar los k vecinos.")

    mapa_data = st_folium(crear_mapa_base(), width=900, height=550, key="mapa_clic")
    last_clicked = (mapa_data or {}).get("last_clicked")
    if last_clicked:
        consulta = punto_consulta(last_clicked["lat"], last_clicked["lng"])
        anterior = st.session_state.resultado_nn
        if anterior is None or anterior.consulta != consulta or anterior.k != k:
            logger.info("Consulta por clic (%.6f, %.6f) k=%d", consulta.latitud, consulta.longitud, k)
            st.session_state.resultado_nn = comparar_consulta(kd, puntos, consulta, k)

    colA, colB = st.columns(2)
    lat_in = colA.number_input("Latitud (manual)", value=lat_centro, min_value=-90.0, max_value=90.0, format="%.6f")
    lon_in = colB.number_input("Longitud (manual)", value=lon_centro, min_value=-180.0, max_value=180.0, format="%.6f")

    if st.button("Buscar vecinos con coordenadas manuales"):
        consulta = punto_consulta(lat_in, lon_in)
        logger.info("Consulta manual (%.6f, %.6f) k=%d", consulta.latitud, consulta.longitud, k)
        st.session_state.resultado_nn = comparar_consulta(kd, puntos, consulta, k)

    r = st.session_state.resultado_nn
    if r:
        st.subheader(f"Resultado para ({r.consulta.latitud:.4f}, {r.consulta.longitud:.4f}), k={r.k}")
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Tiempo KD-Tree (s)", f"{r.tiempo_kd:.6f}")
        c2.metric("Tiempo lineal (s)", f"{r.tiempo_lineal:.6f}")
        c3.metric("Nodos visitados", f"{r.nodos_visitados} / {r.puntos_recorridos}")
        c4.metric("Coinciden", "Sí" if r.coinciden else "No")
        if not r.coinciden:
            st.error("El KD-Tree y la búsqueda lineal devolvieron vecinos distintos.")

        df_nn = pd.DataFrame(r.filas())
        st.dataframe(df_nn)

        mapa_r = crear_mapa_base()
        folium.Marker([r.consulta.latitud, r.consulta.longitud], popup="Consulta",
                      icon=folium.Icon(color="green")).add_to(mapa_r)
        for i, (d, p) in enumerate(r.kd):
            color = color_por_rango(i, len(r.kd))
            folium.CircleMarker([p.latitud, p.longitud], radius=7, color=color, fill=True, fill_opacity=0.9,
                                popup=f"{i + 1}. {p.estado}, {p.condado} ({d:.1f} km)").add_to(mapa_r)
            folium.PolyLine([[r.consulta.latitud, r.consulta.longitud], [p.latitud, p.longitud]],
                            weight=2, color=color).add_to(mapa_r)
        st_folium(mapa_r, width=900, height=550, key="mapa_resultado")

        fig, ax = plt.subplots(figsize=(5, 3))
        pd.Series({"KD-Tree": r.tiempo_kd, "Lineal": r.tiempo_lineal}).plot.bar(ax=ax, title="Tiempo de consulta (s)")
        plt.tight_layout()
        st.pyplot(fig, use_container_width=False)

        csv_buf = io.StringIO()
        df_nn.to_csv(csv_buf, index=False)
        st.download_button("Descargar CSV (vecinos)", data=csv_buf.getvalue().encode("utf-8"),
                           file_name="vecinos.csv", mime="text/csv")

# ==============================
# CONSULTA POR RANGO
# ==============================
elif vista == "Consulta por rango":
    col1, col2 = st.columns(2)
    min_lat = col1.number_input("Latitud mínima", value=float(df["latitud"].min()))
    max_lat = col2.number_input("Latitud máxima", value=float(df["latitud"].max()))
    col3, col4 = st.columns(2)
    min_lon = col3.number_input("Longitud mínima", value=float(df["longitud"].min()))
    max_lon = col4.number_input("Longitud máxima", value=float(df["longitud"].max()))

    if st.button("Ejecutar consulta por rango"):
        caja = (min_lat, max_lat, min_lon, max_lon)
        pts, nodos_v, elapsed = kd.consulta_rango(caja)
        st.session_state.resultado_rango = {"caja": caja, "puntos": pts, "nodos": nodos_v, "tiempo": elapsed}

    rr = st.session_state.resultado_rango
    if rr:
        st.write(f"Puntos encontrados: {len(rr['puntos'])}")
        st.write(f"Nodos visitados: {rr['nodos']}")
        st.write(f"Tiempo (s): {rr['tiempo']:.6f}")
        st.dataframe(puntos_a_dataframe(rr["puntos"]))

        mapa_rg = crear_mapa_base()
        min_lat, max_lat, min_lon, max_lon = rr["caja"]
        rect = [
            [min_lat, min_lon],
            [min_lat, max_lon],
            [max_lat, max_lon],
            [max_lat, min_lon],
            [min_lat, min_lon]
        ]
        folium.Polygon(rect, color="#ffa600", weight=2, fill=True, fill_opacity=0.05).add_to(mapa_rg)
        for p in rr["puntos"]:
            folium.CircleMarker([p.latitud, p.longitud], radius=4, color="#d62728", fill=True).add_to(mapa_rg)
        st_folium(mapa_rg, width=900, height=550, key="mapa_rango")

# ==============================
# COMPARATIVA ALEATORIA
# ==============================
else:
    n_consultas = st.number_input("Número de consultas", min_value=1, max_value=10000,
                                  value=config.CONSULTAS_ALEATORIAS, step=10)
    semilla = st.number_input("Semilla", min_value=0, value=0, step=1)

    if st.button("Ejecutar comparativa"):
        st.session_state.comparativa = comparativa_aleatoria(puntos, int(n_consultas), k, semilla=int(semilla), arbol=kd)

    df_cmp = st.session_state.comparativa
    if df_cmp is not None and not df_cmp.empty:
        c1, c2, c3 = st.columns(3)
        c1.metric("Tiempo medio KD-Tree (s)", f"{df_cmp['tiempo_kd_s'].mean():.6f}")
        c2.metric("Tiempo medio lineal (s)", f"{df_cmp['tiempo_lineal_s'].mean():.6f}")
        c3.metric("Coincidencias", f"{int(df_cmp['coinciden'].sum())} / {len(df_cmp)}")
        st.dataframe(df_cmp)

        fig, ax = plt.subplots(1, 2, figsize=(10, 4))
        df_cmp[["tiempo_kd_s", "tiempo_lineal_s"]].mean().plot.bar(ax=ax[0], title="Tiempo medio (s)")
        df_cmp["nodos_visitados"].plot.hist(ax=ax[1], bins=20, title="Nodos visitados por consulta")
        plt.tight_layout()
        st.pyplot(fig)

        csv_buf = io.StringIO()
        df_cmp.to_csv(csv_buf, index=False)
        st.download_button("Descargar CSV (comparativa)", data=csv_buf.getvalue().encode("utf-8"),
                           file_name="comparativa.csv", mime="text/csv")

# --------------------------
# FIN
# --------------------------
st.sidebar.markdown("---")
st.sidebar.write("Sugerencia: cambia k y vuelve a consultar para comparar tiempos.")
