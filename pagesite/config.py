import os
from dotenv import load_dotenv

def _bool(env_value: str | None, default: bool) -> bool:
    if env_value is None:
        return default
    return env_value.strip().lower() in {"1", "true", "yes", "on"}

def load_config():
    """Central config. Prefers .env, falls back to safe defaults."""
    load_dotenv(override=False)

    base_dir = os.path.dirname(os.path.abspath(__file__))
    proj_dir = os.path.dirname(base_dir)
    db_path = os.path.join(proj_dir, "pagesite.db")

    db_uri = os.environ.get("DATABASE_URL") or f"sqlite:///{db_path}"

    return {
        "SQLALCHEMY_DATABASE_URI": db_uri,
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,

        # Site identity, exposed to templates as SITE
        "SITE_NAME": os.environ.get("SITE_NAME", "Pagesite"),
        "APP_VERSION": "1.0.0",

        "LOG_LEVEL": os.environ.get("LOG_LEVEL", "INFO").upper(),
        "SEED_SAMPLE_POST": _bool(os.environ.get("SEED_SAMPLE_POST"), True),
    }
