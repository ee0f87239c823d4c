import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    EMPLOYEE_API_BASE_URL: str = "http://localhost:8112/api/v1/employee"
    EMPLOYEE_API_TIMEOUT_SECONDS: float = 10.0
    EMPLOYEE_API_MAX_RETRIES: int = 3
    EMPLOYEE_API_INITIAL_BACKOFF_SECONDS: float = 2.0
    EMPLOYEE_API_BACKOFF_MULTIPLIER: float = 2.0
    EMPLOYEE_API_MAX_BACKOFF_SECONDS: float = 30.0

    CORS_ALLOW_ORIGINS: list[str] = ["http://localhost:5173"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
