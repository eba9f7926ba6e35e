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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./accounts.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Accounts
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 10))
    USERNAME_SUFFIX_MAX_ATTEMPTS = int(data.get("USERNAME_SUFFIX_MAX_ATTEMPTS", 100))
    RESET_TOKEN_TTL_MINUTES = int(data.get("RESET_TOKEN_TTL_MINUTES", 30))
    FRONTEND_BASE_URL = data.get("FRONTEND_BASE_URL", "http://localhost:3000")

    # Outbound mail; EMAIL_USER / EMAIL_PASS from the environment take precedence
    MAIL_SERVER = data.get("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(data.get("MAIL_PORT", 587))
    MAIL_USERNAME = os.environ.get("EMAIL_USER", data.get("MAIL_USERNAME", ""))
    MAIL_PASSWORD = os.environ.get("EMAIL_PASS", data.get("MAIL_PASSWORD", ""))
    MAIL_FROM = data.get("MAIL_FROM", MAIL_USERNAME)
    MAIL_FROM_NAME = data.get("MAIL_FROM_NAME", "Account Service")
    MAIL_STARTTLS = bool(data.get("MAIL_STARTTLS", True))
    MAIL_SSL_TLS = bool(data.get("MAIL_SSL_TLS", False))
    MAIL_SUPPRESS_SEND = bool(data.get("MAIL_SUPPRESS_SEND", False))
