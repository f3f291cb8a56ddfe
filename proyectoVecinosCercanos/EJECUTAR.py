import os
import subprocess
import sys

def main():
    # Ruta absoluta del explorador
    ruta_app = os.path.join(os.path.dirname(os.path.abspath(__file__)), "run_app.py")

    # Ejecutar streamlit
    comando = [sys.executable, "-m", "streamlit", "run", ruta_app]

    print("Iniciando explorador de vecinos más cercanos...\n")
    return subprocess.run(comando).returncode

if __name__ == "__main__":
    sys.exit(main())
