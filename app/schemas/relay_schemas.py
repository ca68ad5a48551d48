from __future__ import annotations

from pydantic import BaseModel


class TicketSummary(BaseModel):
    """Resumo do ticket devolvido a quem chamou o webhook."""
    number: int | str | None
    title: str
    customer: str
    status: str
    created_at: str


class RelayResponse(BaseModel):
    message: str
    ticket: TicketSummary | None = None
    error: str | None = None


class MessageResponse(BaseModel):
    message: str
