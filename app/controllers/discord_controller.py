from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response

from app.schemas.relay_schemas import MessageResponse, RelayResponse
from app.schemas.ticket_schemas import TicketEvent
from app.services.discord_service import DiscordService, get_discord_service
from app.services.relay_service import RelayService


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Discord"])


def get_relay_service(
    discord: DiscordService = Depends(get_discord_service),
) -> RelayService:
    return RelayService(discord)


async def get_ticket_event(request: Request) -> TicketEvent:
    """
    Lê o corpo da requisição como evento de ticket.

    Corpo vazio, JSON inválido ou qualquer JSON que não seja um objeto
    viram um evento vazio, que é formatado com os placeholders.
    """
    try:
        body = await request.json()
    except ValueError:
        logger.warning("Corpo da requisição não é JSON válido, tratado como evento vazio")
        body = None

    if not isinstance(body, dict):
        logger.debug(f"Corpo do tipo {type(body).__name__} ignorado")
        body = {}

    return TicketEvent.model_validate(body)


@router.get("/discord", response_model=MessageResponse)
def discord_info():
    return MessageResponse(message="API - Zammad → Discord webhook relay")


@router.post(
    "/discord",
    response_model=RelayResponse,
    response_model_exclude_unset=True,
    responses={
        207: {"model": RelayResponse, "description": "Ticket recebido, mas o Discord recusou a notificação"},
        500: {"model": RelayResponse, "description": "Webhook não configurado ou falha de rede"},
    },
)
def relay_ticket(
    response: Response,
    event: TicketEvent = Depends(get_ticket_event),
    relay: RelayService = Depends(get_relay_service),
):
    """
    Recebe um evento de ticket do Zammad e repassa ao Discord.

    - **200**: notificação entregue
    - **207**: Discord recusou a mensagem (detalhes em ``error``)
    - **500**: webhook não configurado ou Discord inacessível
    """
    logger.debug(f"Evento recebido para o ticket {event.ticket_data.number}")

    outcome = relay.handle(event)

    response.status_code = outcome.status_code
    return outcome.to_response()
