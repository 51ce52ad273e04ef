# mobile_backend/config.py
import os

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").strip().lower()
if LOG_LEVEL not in LOG_LEVELS:
    raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {LOG_LEVEL!r}")

# Comma separated, "*" allows any origin (Ionic / RN web dev servers)
ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

BACKEND_URL = os.getenv("BACKEND_URL", f"http://localhost:{PORT}")
HTTP_TIMEOUT_SEC = float(os.getenv("HTTP_TIMEOUT_SEC", "6"))

GREETING = "Hello from Node.js backend!"
DATA_RECEIVED_MESSAGE = "Data received!"
