import logging

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DUPLICATE_SIGNUP_STATUS_CODES = (409, 500)
MALFORMED_JSON_STATUS_CODES = (400, 500)


class Settings(BaseSettings):
    PROJECT_NAME: str = "Mercator Signup API"
    DATABASE_URL: str = "sqlite+aiosqlite:///./signups.db"
    ENVIRONMENT: str = "development"

    # CORS Settings
    CORS_ALLOW_ORIGIN: str = "*"
    CORS_ALLOW_METHODS: str = "POST, OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type"

    # Error status codes
    DUPLICATE_SIGNUP_STATUS_CODE: int = 500  # 409 is the semantically correct choice
    MALFORMED_JSON_STATUS_CODE: int = 500

    LOGFIRE_TOKEN: str = ""
    SENTRY_DSN: str = ""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.DUPLICATE_SIGNUP_STATUS_CODE not in DUPLICATE_SIGNUP_STATUS_CODES:
            raise ValueError(
                f"DUPLICATE_SIGNUP_STATUS_CODE must be one of {DUPLICATE_SIGNUP_STATUS_CODES}, "
                f"got {self.DUPLICATE_SIGNUP_STATUS_CODE}"
            )
        if self.MALFORMED_JSON_STATUS_CODE not in MALFORMED_JSON_STATUS_CODES:
            raise ValueError(
                f"MALFORMED_JSON_STATUS_CODE must be one of {MALFORMED_JSON_STATUS_CODES}, "
                f"got {self.MALFORMED_JSON_STATUS_CODE}"
            )
        if self.ENVIRONMENT == "production" and self.CORS_ALLOW_ORIGIN == "*":
            logger.warning(
                "CORS_ALLOW_ORIGIN is '*' in production; set it to the signup site's origin"
            )

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
