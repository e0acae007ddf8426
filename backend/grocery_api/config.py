import os

APP_VERSION = "0.1.0"

HOST = os.environ.get("GROCERY_API_HOST", "0.0.0.0")
PORT = int(os.environ.get("GROCERY_API_PORT", "3000"))
LOG_LEVEL = os.environ.get("GROCERY_API_LOG_LEVEL", "INFO")
