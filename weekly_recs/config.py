import os
import yaml

ROOT_PATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./weekly_recs.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "dev-admin-key-change-in-production")

    # Weekly cycle (weekday: 0=Monday ... 6=Sunday)
    TIMEZONE = data.get("TIMEZONE", "America/New_York")
    WINDOW_OPEN_WEEKDAY = int(data.get("WINDOW_OPEN_WEEKDAY", 3))
    WINDOW_OPEN_HOUR = int(data.get("WINDOW_OPEN_HOUR", 9))
    WINDOW_CLOSE_WEEKDAY = int(data.get("WINDOW_CLOSE_WEEKDAY", 6))
    WINDOW_CLOSE_HOUR = int(data.get("WINDOW_CLOSE_HOUR", 18))
    REMINDER_WINDOW_HOURS = int(data.get("REMINDER_WINDOW_HOURS", 24))
    RETENTION_WEEKS = int(data.get("RETENTION_WEEKS", 12))

    # Invitations
    STREAK_REQUIRED_FOR_INVITE = int(data.get("STREAK_REQUIRED_FOR_INVITE", 4))
    MAX_INVITES_PER_MEMBER = int(data.get("MAX_INVITES_PER_MEMBER", 5))
    INVITE_EXPIRY_DAYS = int(data.get("INVITE_EXPIRY_DAYS", 7))
