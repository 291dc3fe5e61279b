import os

# ✅ Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///data/data.db")

# ✅ Site
SITE_ROOT = os.getenv("SITE_ROOT", "site")
SITE_ADDR = os.getenv("SITE_ADDR", "0.0.0.0:8080")

# ✅ Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# ✅ Startup
RUN_MIGRATIONS = os.getenv("RUN_MIGRATIONS", "1") == "1"


def parse_site_addr(addr: str = SITE_ADDR) -> tuple[str, int]:
    """Split a "host:port" bind address. A bare port binds every interface."""
    host, sep, port = addr.rpartition(":")
    if not sep:
        return "0.0.0.0", int(addr)
    return host or "0.0.0.0", int(port)


# ✅ CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]
