from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _as_text(value: Any) -> str | None:
    """Converte escalares em texto; objetos, listas e strings vazias viram None."""
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return None
    text = str(value).strip()
    return text or None


def _as_number(value: Any) -> int | str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    return _as_text(value)


def _as_object(value: Any) -> Any:
    if isinstance(value, (dict, BaseModel)):
        return value
    return None


def _as_priority(value: Any) -> Any:
    # Alguns triggers enviam a prioridade apenas como nome
    if isinstance(value, str):
        return {"name": value}
    return _as_object(value)


Text = Annotated[str | None, BeforeValidator(_as_text)]
Number = Annotated[int | str | None, BeforeValidator(_as_number)]


class _ZammadModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ZammadPriority(_ZammadModel):
    name: Text = None

class ZammadPerson(_ZammadModel):
    firstname: Text = None
    lastname: Text = None
    email: Text = None

class ZammadOrganization(_ZammadModel):
    name: Text = None

class ZammadTicket(_ZammadModel):
    number: Number = None
    title: Text = None
    state: Text = None
    created_at: Text = None
    priority: Annotated[ZammadPriority | None, BeforeValidator(_as_priority)] = None
    customer: Annotated[ZammadPerson | None, BeforeValidator(_as_object)] = None
    organization: Annotated[ZammadOrganization | None, BeforeValidator(_as_object)] = None
    owner: Annotated[ZammadPerson | None, BeforeValidator(_as_object)] = None


class TicketEvent(_ZammadModel):
    """
    Payload recebido do webhook do Zammad.

    Todos os campos são opcionais. O Zammad aninha cliente, organização e
    responsável dentro de ``ticket``; alguns triggers enviam esses objetos na
    raiz do corpo. As propriedades ``customer_data``, ``organization_data`` e
    ``owner_data`` resolvem os dois formatos, dando preferência ao aninhado.
    """
    ticket: Annotated[ZammadTicket | None, BeforeValidator(_as_object)] = None
    customer: Annotated[ZammadPerson | None, BeforeValidator(_as_object)] = None
    organization: Annotated[ZammadOrganization | None, BeforeValidator(_as_object)] = None
    owner: Annotated[ZammadPerson | None, BeforeValidator(_as_object)] = None

    @property
    def ticket_data(self) -> ZammadTicket:
        return self.ticket or ZammadTicket()

    @property
    def customer_data(self) -> ZammadPerson:
        return self.ticket_data.customer or self.customer or ZammadPerson()

    @property
    def organization_data(self) -> ZammadOrganization:
        return self.ticket_data.organization or self.organization or ZammadOrganization()

    @property
    def owner_data(self) -> ZammadPerson:
        return self.ticket_data.owner or self.owner or ZammadPerson()
