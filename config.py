import os

from core.errors import ConfigurationError


def env(name: str, default: str = "") -> str:
    value = os.getenv(name, default)
    return value if value is not None else default

# Telegram
TG_WEBHOOK_SECRET = env("TG_WEBHOOK_SECRET")  # put a random string, used in /tg/<secret>


def get_bot_token() -> str:
    """Токен читаем на каждый запрос и дальше передаём явно, без глобалов."""
    token = env("TG_TOKEN") or env("TELEGRAM_TOKEN")  # TELEGRAM_TOKEN - старое имя
    if not token:
        raise ConfigurationError("TG_TOKEN environment variable is not set")
    return token
