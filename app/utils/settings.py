from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

class Settings:

    discord_username: str = os.getenv("DISCORD_USERNAME", "Zammad")
    discord_avatar_url: str | None = os.getenv("DISCORD_AVATAR_URL") or None
    discord_footer_text: str = os.getenv("DISCORD_FOOTER_TEXT", "Zammad Webhook")
    discord_footer_icon_url: str | None = os.getenv("DISCORD_FOOTER_ICON_URL") or None
    discord_timeout_seconds: float = float(os.getenv("DISCORD_TIMEOUT_SECONDS", "10"))

    display_timezone: str = os.getenv("DISPLAY_TIMEZONE", "America/Sao_Paulo")

    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def discord_webhook_url(self) -> str | None:
        # Lida a cada requisição, permite trocar o destino sem reiniciar
        return os.getenv("DISCORD_WEBHOOK_URL") or None

settings = Settings()
