"""
Formatação de tickets do Zammad em mensagens (embeds) do Discord.

Todas as funções aceitam dados ausentes ou incompletos e devolvem textos
padrão ("Não informado", "Não atribuído", ...) em vez de falhar.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.schemas.discord_schemas import (
    DiscordEmbed,
    DiscordEmbedField,
    DiscordEmbedFooter,
    DiscordMessage,
)
from app.schemas.relay_schemas import TicketSummary
from app.schemas.ticket_schemas import TicketEvent
from app.utils.settings import settings


logger = logging.getLogger(__name__)


NOT_INFORMED = "Não informado"
UNASSIGNED = "Não atribuído"
UNTITLED = "Sem título"
NO_NUMBER = "N/A"

COLOR_GREEN = 0x00FF00
COLOR_RED = 0xFF0000
COLOR_YELLOW = 0xFFFF00
COLOR_GRAY = 0x808080

DATE_FORMAT = "%d/%m/%Y %H:%M:%S"

# Limites de tamanho da API de webhooks do Discord
TITLE_LIMIT = 256
DESCRIPTION_LIMIT = 4096
FIELD_NAME_LIMIT = 256
FIELD_VALUE_LIMIT = 1024
FOOTER_LIMIT = 2048


@dataclass
class MessageBranding:
    """Identidade visual aplicada a todas as mensagens enviadas."""
    username: str = "Zammad"
    avatar_url: str | None = None
    footer_text: str = "Zammad Webhook"
    footer_icon_url: str | None = None
    display_timezone: str = "UTC"

    @classmethod
    def from_settings(cls) -> MessageBranding:
        return cls(
            username=settings.discord_username,
            avatar_url=settings.discord_avatar_url,
            footer_text=settings.discord_footer_text,
            footer_icon_url=settings.discord_footer_icon_url,
            display_timezone=settings.display_timezone,
        )


def state_color(state: str | None) -> int:
    """
    Cor do embed a partir do estado do ticket (sem diferenciar maiúsculas).

    - open / new: verde
    - closed: vermelho
    - pending (inclusive "pending reminder" e "pending close"): amarelo
    - qualquer outro ou ausente: cinza
    """
    normalized = (state or "").strip().lower()
    if normalized in ("open", "new"):
        return COLOR_GREEN
    if normalized == "closed":
        return COLOR_RED
    if normalized == "pending" or normalized.startswith("pending "):
        return COLOR_YELLOW
    return COLOR_GRAY


def format_person_name(
    firstname: str | None,
    lastname: str | None,
    placeholder: str = NOT_INFORMED,
) -> str:
    """Junta nome e sobrenome, normalizando espaços. Usa o placeholder se ambos estiverem vazios."""
    full_name = " ".join(f"{firstname or ''} {lastname or ''}".split())
    return full_name or placeholder


@lru_cache
def _resolve_timezone(name: str) -> tzinfo:
    if name.strip().upper() in ("UTC", "Z", ""):
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Timezone '{name}' desconhecido, usando UTC")
        return timezone.utc


def format_date(value: str | None, tz_name: str = "UTC") -> str:
    """
    Formata um timestamp ISO 8601 no padrão pt-BR (dd/mm/aaaa hh:mm:ss).

    Aceita sufixo "Z" e frações de segundo. Datas sem fuso são tratadas
    como UTC. Retorna NOT_INFORMED se o valor estiver ausente, for inválido
    ou ficar fora do intervalo representável ao converter o fuso.
    """
    if not value:
        return NOT_INFORMED

    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = f"{text[:-1]}+00:00"

    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(_resolve_timezone(tz_name)).strftime(DATE_FORMAT)
    except (ValueError, OverflowError):
        logger.debug(f"Data inválida ignorada: {value!r}")
        return NOT_INFORMED


def truncate(text: str, limit: int) -> str:
    """Corta o texto no limite informado, terminando com reticências."""
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def utc_now_iso() -> str:
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _ticket_label(event: TicketEvent) -> str:
    number = event.ticket_data.number
    return NO_NUMBER if number is None else str(number)


def _field(name: str, value: str, inline: bool = True) -> DiscordEmbedField:
    return DiscordEmbedField(
        name=truncate(name, FIELD_NAME_LIMIT),
        value=truncate(value, FIELD_VALUE_LIMIT),
        inline=inline,
    )


def _footer(branding: MessageBranding) -> DiscordEmbedFooter:
    return DiscordEmbedFooter(
        text=truncate(branding.footer_text, FOOTER_LIMIT),
        icon_url=branding.footer_icon_url,
    )


def build_ticket_summary(event: TicketEvent, tz_name: str = "UTC") -> TicketSummary:
    ticket = event.ticket_data
    customer = event.customer_data
    return TicketSummary(
        number=ticket.number,
        title=ticket.title or UNTITLED,
        customer=format_person_name(customer.firstname, customer.lastname),
        status=ticket.state or NOT_INFORMED,
        created_at=format_date(ticket.created_at, tz_name),
    )


def build_ticket_message(
    event: TicketEvent,
    branding: MessageBranding | None = None,
    timestamp: str | None = None,
) -> DiscordMessage:
    """
    Monta a mensagem do Discord para um evento de ticket.

    Args:
        event: Payload recebido do Zammad.
        branding: Nome, avatar, rodapé e timezone das mensagens.
        timestamp: Horário ISO 8601 do embed (padrão: agora, em UTC).

    Returns:
        Mensagem com um único embed descrevendo o ticket.
    """
    branding = branding or MessageBranding()
    ticket = event.ticket_data
    customer = event.customer_data
    owner = event.owner_data
    priority = ticket.priority.name if ticket.priority else None

    fields = [
        _field("👤 Cliente", format_person_name(customer.firstname, customer.lastname)),
        _field("📧 Email", customer.email or NOT_INFORMED),
        _field("🏢 Organização", event.organization_data.name or NOT_INFORMED),
        _field("👨‍💼 Responsável", format_person_name(owner.firstname, owner.lastname, UNASSIGNED)),
        _field("📊 Status", ticket.state or NOT_INFORMED),
        _field("⚡ Prioridade", priority or NOT_INFORMED),
        _field("📅 Criado em", format_date(ticket.created_at, branding.display_timezone), inline=False),
    ]

    embed = DiscordEmbed(
        title=truncate(f"🎫 Ticket #{_ticket_label(event)}", TITLE_LIMIT),
        description=truncate(ticket.title or UNTITLED, DESCRIPTION_LIMIT),
        color=state_color(ticket.state),
        fields=fields,
        timestamp=timestamp or utc_now_iso(),
        footer=_footer(branding),
    )

    return DiscordMessage(
        username=branding.username,
        avatar_url=branding.avatar_url,
        embeds=[embed],
    )


def build_error_message(
    event: TicketEvent,
    error: str,
    branding: MessageBranding | None = None,
    timestamp: str | None = None,
) -> DiscordMessage:
    """Monta a mensagem que avisa no Discord que a notificação de um ticket falhou."""
    branding = branding or MessageBranding()
    embed = DiscordEmbed(
        title=truncate(f"⚠️ Falha ao notificar ticket #{_ticket_label(event)}", TITLE_LIMIT),
        description=truncate(error or NOT_INFORMED, DESCRIPTION_LIMIT),
        color=COLOR_RED,
        timestamp=timestamp or utc_now_iso(),
        footer=_footer(branding),
    )
    return DiscordMessage(
        username=branding.username,
        avatar_url=branding.avatar_url,
        embeds=[embed],
    )
