import os
from dotenv import load_dotenv

# Load environment variables only for local development
ENV_FILE_LOADED = os.path.exists(".env")
if ENV_FILE_LOADED:
    load_dotenv()

# ------------------------------------------------------------------------------
# APPLICATION
# ------------------------------------------------------------------------------
APP_NAME = os.getenv("APP_NAME", "String Analyzer Service")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
RELOAD = os.getenv("RELOAD", "false").lower() in ("1", "true", "yes")

# ------------------------------------------------------------------------------
# LOGGING & CORS
# ------------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
