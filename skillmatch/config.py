# skillmatch/config.py
import os
from pathlib import Path
from dotenv import load_dotenv

# --- Load env from skillmatch/.env OR .env (whichever exists) ---
# Works whether you run from repo root or skillmatch/
root = Path(__file__).resolve().parents[1]          # project root
package_env = root / "skillmatch" / ".env"
root_env = root / ".env"
if package_env.exists():
    load_dotenv(package_env)
elif root_env.exists():
    load_dotenv(root_env)

# === 🌍 App Configuration ===
ENV = os.getenv("ENV", "dev").lower()
AUTO_MIGRATE = os.getenv("AUTO_MIGRATE", "false").strip().lower() == "true"
USE_AUTH_MIDDLEWARE = os.getenv("USE_AUTH_MIDDLEWARE", "false").strip().lower() == "true"
SEED_JOBS = os.getenv("SEED_JOBS", "true").strip().lower() == "true"

# === 🔐 Auth ===
JWT_SECRET = os.getenv("JWT_SECRET") or os.getenv("SECRET_KEY") or "dev_insecure_change_me"
JWT_ALGO = os.getenv("JWT_ALGO", "HS256")
JWT_EXPIRES_MIN = int(os.getenv("JWT_EXPIRES_MIN", "60"))
# Tolerate small clock drift (seconds)
JWT_LEEWAY_SEC = int(os.getenv("JWT_LEEWAY_SEC", "30"))

# === 🎯 Matching ===
def _parse_basis(raw: str):
    """'required' (or empty) -> None, meaning each posting's own skill count.
    A positive integer is used as a fixed denominator for every posting."""
    raw = (raw or "").strip().lower()
    if raw in ("", "required", "posting"):
        return None
    value = int(raw)
    if value <= 0:
        raise ValueError("MATCH_PERCENT_BASIS must be 'required' or a positive integer")
    return value

MATCH_PERCENT_BASIS = _parse_basis(os.getenv("MATCH_PERCENT_BASIS", "required"))

# === 🌍 CORS Settings ===
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",")
    if origin.strip()
]

# === 🗄️ Database Configuration (robust) ===
def _resolve_sqlite_url(url: str) -> str:
    """Turn 'sqlite:///relative.db' into an absolute path under project root.
    Keep ':memory:' as-is. Ensure absolute paths use 4 slashes."""
    if not url.startswith("sqlite:"):
        return url
    # ':memory:' or the bare in-memory form
    if ":memory:" in url or url.rstrip("/") == "sqlite:":
        return url
    prefix = "sqlite:///"
    if url.startswith(prefix):
        path = url[len(prefix):]
        if Path(path).is_absolute():
            return f"sqlite:////{Path(path).as_posix().lstrip('/')}"
        abs_path = (root / path).resolve()
        return f"sqlite:////{abs_path.as_posix().lstrip('/')}"
    return url

# Prefer env DATABASE_URL; if missing, persist to ./data/skillmatch.db
_env_db = os.getenv("DATABASE_URL")
if _env_db:
    DATABASE_URL = _resolve_sqlite_url(_env_db)
else:
    data_dir = (root / "data").resolve()
    data_dir.mkdir(parents=True, exist_ok=True)
    sqlite_path = (data_dir / "skillmatch.db").resolve()
    DATABASE_URL = f"sqlite:////{sqlite_path.as_posix().lstrip('/')}"

# Optional SQL echo for debugging (SQL_ECHO=true)
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
