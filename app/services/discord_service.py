from __future__ import annotations

import logging

import requests

from app.utils.settings import settings

logger = logging.getLogger(__name__)

class DiscordServiceError(RuntimeError):
    pass

class DiscordConfigError(DiscordServiceError):
    pass

class DiscordRejectedError(DiscordServiceError):

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Discord webhook failed: {status_code} - {body}")

class DiscordNetworkError(DiscordServiceError):
    pass

class DiscordService:
    """
    Cliente do webhook do Discord.

    Faz um único POST por mensagem, sem retentativas. A URL de destino é
    recebida no construtor; quem cria o serviço decide de onde ela vem.
    """

    def __init__(
        self,
        webhook_url: str | None,
        timeout: float | None = None,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout or settings.discord_timeout_seconds

    @property
    def is_configured(self) -> bool:
        return bool(self.webhook_url)

    def _validate_config(self) -> None:
        if not self.is_configured:
            raise DiscordConfigError("Discord webhook URL não configurada")

    def _get_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
        }

    def send_message(self, message: dict) -> None:
        """
        Envia o documento ``message`` para o webhook.

        Raises:
            DiscordConfigError: URL do webhook ausente.
            DiscordRejectedError: Discord respondeu com status >= 400.
            DiscordNetworkError: falha de rede ou timeout.
        """
        self._validate_config()

        logger.debug(f"Enviando mensagem ao Discord: {message}")
        try:
            response = requests.post(
                self.webhook_url,
                json=message,
                headers=self._get_headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise DiscordNetworkError(f"Erro de conexão com o Discord: {e}") from e

        if response.status_code >= 400:
            raise DiscordRejectedError(response.status_code, response.text)

        logger.debug(f"Mensagem aceita pelo Discord com status {response.status_code}")

def get_discord_service() -> DiscordService:
    """Dependency do FastAPI: lê a URL do webhook a cada requisição."""
    return DiscordService(webhook_url=settings.discord_webhook_url)
