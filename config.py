import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./prompt_access.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    # Identity provider tokens
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_AUDIENCE = data.get("JWT_AUDIENCE", "authenticated")
    # Service-to-service credentials
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    IDENTITY_WEBHOOK_SECRET = data.get(
        "IDENTITY_WEBHOOK_SECRET", "test-webhook-secret-12345"
    )
    # Bootstrap / invitations
    SUPER_ADMIN_EMAIL = data.get("SUPER_ADMIN_EMAIL", "")
    BOOTSTRAP_TOKEN = data.get("BOOTSTRAP_TOKEN", "admin-bootstrap-token")
    PUBLIC_ORGANIZATION_NAME = data.get("PUBLIC_ORGANIZATION_NAME", "Public Organization")
    INVITATION_TTL_DAYS = int(data.get("INVITATION_TTL_DAYS", 7))
    BOOTSTRAP_INVITATION_TTL_DAYS = int(data.get("BOOTSTRAP_INVITATION_TTL_DAYS", 365))
