from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from app.schemas.relay_schemas import RelayResponse, TicketSummary
from app.schemas.ticket_schemas import TicketEvent
from app.services.discord_service import (
    DiscordConfigError,
    DiscordRejectedError,
    DiscordService,
    DiscordServiceError,
)
from app.utils.ticket_formatter import (
    MessageBranding,
    build_error_message,
    build_ticket_message,
    build_ticket_summary,
)


logger = logging.getLogger(__name__)


class RelayStatus(str, Enum):
    DELIVERED = "delivered"
    PARTIALLY_DELIVERED = "partially_delivered"
    FAILED = "failed"


STATUS_CODES = {
    RelayStatus.DELIVERED: 200,
    RelayStatus.PARTIALLY_DELIVERED: 207,
    RelayStatus.FAILED: 500,
}


@dataclass
class RelayOutcome:
    """Resultado do repasse de um ticket, devolvido a quem chamou o webhook."""
    status: RelayStatus
    message: str
    ticket: TicketSummary | None = None
    error: str | None = None

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.status]

    def to_response(self) -> RelayResponse:
        # Só define o que existe: a resposta omite ticket/error ausentes,
        # mas mantém campos nulos do resumo (ex.: number)
        fields: dict = {"message": self.message}
        if self.ticket is not None:
            fields["ticket"] = self.ticket
        if self.error is not None:
            fields["error"] = self.error
        return RelayResponse(**fields)


class RelayService:
    """
    Repassa eventos de ticket do Zammad para o Discord.

    Fluxo:
    1. Monta o resumo e a mensagem do ticket (campos ausentes viram placeholders)
    2. Envia a mensagem ao webhook, uma única vez
    3. Se o Discord recusar (status >= 400), responde 207 com o diagnóstico
    4. Se a rede falhar, tenta um aviso de erro no mesmo webhook e responde 500
    """

    def __init__(
        self,
        discord: DiscordService,
        branding: MessageBranding | None = None,
    ):
        self.discord = discord
        self.branding = branding or MessageBranding.from_settings()

    def _report_failure(self, event: TicketEvent, error: str) -> None:
        """Envia um aviso de falha ao Discord. O resultado só é logado, nunca propagado."""
        try:
            message = build_error_message(event, error, self.branding)
            self.discord.send_message(message.to_payload())
        except Exception as e:
            logger.error(f"Erro ao enviar aviso de falha ao Discord: {e}")
            return

        logger.info("Aviso de falha enviado ao Discord")

    def handle(self, event: TicketEvent) -> RelayOutcome:
        summary = build_ticket_summary(event, self.branding.display_timezone)
        message = build_ticket_message(event, self.branding)

        try:
            self.discord.send_message(message.to_payload())
        except DiscordConfigError as e:
            logger.error(f"Ticket #{summary.number} não enviado: {e}")
            return RelayOutcome(
                status=RelayStatus.FAILED,
                message=str(e),
                error=str(e),
            )
        except DiscordRejectedError as e:
            logger.warning(f"Discord recusou o ticket #{summary.number}: {e}")
            return RelayOutcome(
                status=RelayStatus.PARTIALLY_DELIVERED,
                message="Ticket recebido, mas o Discord recusou a notificação",
                ticket=summary,
                error=str(e),
            )
        except DiscordServiceError as e:
            logger.error(f"Erro ao enviar ticket #{summary.number} ao Discord: {e}")
            self._report_failure(event, str(e))
            return RelayOutcome(
                status=RelayStatus.FAILED,
                message="Erro ao enviar dados ao Discord",
                error=str(e),
            )

        logger.info(f"Ticket #{summary.number} enviado ao Discord")
        return RelayOutcome(
            status=RelayStatus.DELIVERED,
            message="Ticket recebido e enviado ao Discord com sucesso",
            ticket=summary,
        )
