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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./himaq.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    CREATE_TABLES = bool(data.get("CREATE_TABLES", True))

    # Public origin used to build links sent by email
    APP_ORIGIN = data.get("APP_ORIGIN", "https://www.hima-quiz.com")
    # Login handles map to "<handle>@<AUTH_EMAIL_DOMAIN>" in the identity store
    AUTH_EMAIL_DOMAIN = data.get("AUTH_EMAIL_DOMAIN", "hima-quiz.com")

    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_DAYS = data.get("JWT_EXPIRE_DAYS", 7)
    AUTH_COOKIE_NAME = data.get("AUTH_COOKIE_NAME", "access_token")
    AUTH_COOKIE_SECURE = bool(data.get("AUTH_COOKIE_SECURE", False))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")

    RESET_TOKEN_TTL_MINUTES = data.get("RESET_TOKEN_TTL_MINUTES", 30)
    RESET_TOKEN_RETENTION_HOURS = data.get("RESET_TOKEN_RETENTION_HOURS", 24)

    # "resend" sends through the Resend HTTP API, "log" only logs outgoing mail
    EMAIL_BACKEND = data.get("EMAIL_BACKEND", "log")
    RESEND_API_URL = data.get("RESEND_API_URL", "https://api.resend.com")
    RESEND_API_KEY = data.get("RESEND_API_KEY", "")
    RESEND_FROM_EMAIL = data.get("RESEND_FROM_EMAIL", "noreply@hima-quiz.com")
    EMAIL_TIMEOUT_SECONDS = data.get("EMAIL_TIMEOUT_SECONDS", 10)
    CONTACT_TO_EMAIL = data.get("CONTACT_TO_EMAIL", "support@hima-quiz.com")

    ARTICLES_DIR = data.get("ARTICLES_DIR", os.path.join(ROOT_PATH, "articles"))
