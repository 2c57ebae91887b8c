import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./moneytracker.db")
    DB_ECHO = bool(data.get("DB_ECHO", False))
    DB_POOL_SIZE = data.get("DB_POOL_SIZE", 5)
    DB_MAX_OVERFLOW = data.get("DB_MAX_OVERFLOW", 10)
    DB_POOL_TIMEOUT = data.get("DB_POOL_TIMEOUT", 10)  # Seconds to wait for a pooled connection
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8080)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # bcrypt cost factor (log2 iterations); 12 is the current recommended minimum
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 12)

    # Optional directory of frontend assets, served at / when set and present
    STATIC_DIR = data.get("STATIC_DIR")
