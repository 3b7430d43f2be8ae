# config/settings.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "students"
    mongo_collection: str = "students"
    op_timeout: float = 5.0
    connect_timeout: float = 10.0
    host: str = "localhost"
    port: int = 6000
    cors_origins: tuple = ("*",)
    log_level: str = "INFO"


def _positive_float(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _port(raw):
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


def load_settings():
    """Read settings from the environment (and a .env file, if present)."""
    load_dotenv()
    defaults = Settings()

    origins = os.getenv("CORS_ORIGINS", "*")
    cors_origins = tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",)

    return Settings(
        mongo_uri=os.getenv("MONGO_URI") or defaults.mongo_uri,
        mongo_db=os.getenv("MONGO_DB") or defaults.mongo_db,
        mongo_collection=os.getenv("MONGO_COLLECTION") or defaults.mongo_collection,
        op_timeout=_positive_float("MONGO_OP_TIMEOUT", defaults.op_timeout),
        connect_timeout=_positive_float("MONGO_CONNECT_TIMEOUT", defaults.connect_timeout),
        host=os.getenv("HOST") or defaults.host,
        port=_port(os.getenv("PORT") or str(defaults.port)),
        cors_origins=cors_origins,
        log_level=(os.getenv("LOG_LEVEL") or defaults.log_level).upper(),
    )
