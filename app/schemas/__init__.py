from app.schemas.discord_schemas import (
    DiscordEmbed,
    DiscordEmbedField,
    DiscordEmbedFooter,
    DiscordMessage,
)
from app.schemas.relay_schemas import MessageResponse, RelayResponse, TicketSummary
from app.schemas.ticket_schemas import (
    TicketEvent,
    ZammadOrganization,
    ZammadPerson,
    ZammadPriority,
    ZammadTicket,
)

__all__ = [
    "DiscordEmbed",
    "DiscordEmbedField",
    "DiscordEmbedFooter",
    "DiscordMessage",
    "MessageResponse",
    "RelayResponse",
    "TicketEvent",
    "TicketSummary",
    "ZammadOrganization",
    "ZammadPerson",
    "ZammadPriority",
    "ZammadTicket",
]
