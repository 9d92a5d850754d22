"""
Start the email generator page with `streamlit run`
"""
import subprocess
import sys
import os

APP_SCRIPT = "streamlit_app.py"


def build_command(port=None):
    """Command line that serves the page, optionally on a fixed port"""
    command = [sys.executable, "-m", "streamlit", "run", APP_SCRIPT]
    if port:
        command += ["--server.port", str(port)]
    return command


def main():
    """Serve streamlit_app.py from the project directory"""
    # streamlit_app.py imports the layer packages relative to this folder
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    port = os.getenv("PORT")
    print(f"Starting AI Email Generator on http://localhost:{port or 8501}")
    return subprocess.run(build_command(port)).returncode


if __name__ == "__main__":
    sys.exit(main())
