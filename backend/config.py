import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Gemini call
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout_seconds: float = 25.0
    temperature: float = 0.3
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 4096

    # Fixed-window admission control, per client key
    rate_limit_requests: int = 5
    rate_limit_window_seconds: float = 60.0
    rate_limit_sweep_interval_seconds: float = 600.0

    # Input bounds (characters, measured before sanitization)
    max_upload_size_mb: int = 5
    job_description_min_chars: int = 100
    job_description_max_chars: int = 25000
    resume_min_chars: int = 50
    resume_max_chars: int = 25000

    # Shape of a Google AI Studio key
    api_key_prefix: str = "AIza"
    api_key_min_length: int = 30

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
