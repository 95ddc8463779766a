# catalog/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

# produkcja musi ustawic APP_ENV, inaczej /docs, /redoc i /openapi.json sa wystawione
APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 8000))
