import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


class Config:
    # HTTP server
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "5000"))
    PORT_RETRIES = int(os.getenv("PORT_RETRIES", "10"))

    # Rate limiting: 100 cereri / 15 minute / client
    RATE_LIMIT_MAX_REQUESTS = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "100"))
    RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900"))

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Client (CLI / GUI)
    API_URL = os.getenv("API_URL", "http://localhost:5000").rstrip("/")
    API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

    # HaveIBeenPwned
    HIBP_ENABLED = _env_flag("HIBP_ENABLED", "false")
    HIBP_TIMEOUT = float(os.getenv("HIBP_TIMEOUT", "8"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Generator / politică (nu vin din environment)
    DEFAULT_PASSWORD_LENGTH = 16
    MIN_PASSWORD_LENGTH = 8
    MAX_PASSWORD_LENGTH = 100
    POLICY_MIN_LENGTH = 12
    POLICY_MAX_LENGTH = 100

    @classmethod
    def validate(cls):
        """Verifică valorile citite din environment."""
        problems = []
        if not 1 <= cls.PORT <= 65535:
            problems.append(f"PORT must be in 1..65535, got {cls.PORT}")
        if cls.PORT_RETRIES < 0:
            problems.append(f"PORT_RETRIES must be >= 0, got {cls.PORT_RETRIES}")
        if cls.RATE_LIMIT_MAX_REQUESTS <= 0:
            problems.append("RATE_LIMIT_MAX_REQUESTS must be positive")
        if cls.RATE_LIMIT_WINDOW_SECONDS <= 0:
            problems.append("RATE_LIMIT_WINDOW_SECONDS must be positive")
        if cls.API_TIMEOUT <= 0 or cls.HIBP_TIMEOUT <= 0:
            problems.append("Timeouts must be positive")

        if problems:
            raise ValueError("Invalid configuration: " + "; ".join(problems))

        return True
