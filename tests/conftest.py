"""
pytest configuration and shared fixtures
"""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.controllers.discord_controller import get_relay_service
from app.services.discord_service import DiscordService
from app.services.relay_service import RelayService
from app.utils.ticket_formatter import MessageBranding
from main import app


WEBHOOK_URL = "https://discord.test/api/webhooks/123/token"


@pytest.fixture
def sample_event_payload() -> dict:
    """Payload com ticket completo e cliente na raiz do corpo"""
    return {
        "ticket": {
            "number": 123,
            "title": "Printer jam",
            "state": "open",
            "created_at": "2024-01-05T10:00:00Z",
            "priority": {"name": "High"},
        },
        "customer": {
            "firstname": "Ana",
            "lastname": "Silva",
            "email": "ana@x.com",
        },
    }


@pytest.fixture
def zammad_event_payload() -> dict:
    """Payload no formato enviado pelo Zammad, com objetos aninhados no ticket"""
    return {
        "ticket": {
            "number": "31001",
            "title": "VPN não conecta",
            "state": "pending reminder",
            "created_at": "2024-03-10T18:30:15.123Z",
            "priority": {"name": "2 normal"},
            "customer": {"firstname": "Bruno", "lastname": "Costa", "email": "bruno@empresa.com"},
            "organization": {"name": "Empresa LTDA"},
            "owner": {"firstname": "Carla", "lastname": "Souza"},
        },
    }


@pytest.fixture
def branding() -> MessageBranding:
    return MessageBranding(
        username="Zammad",
        footer_text="Zammad Webhook",
        display_timezone="UTC",
    )


@pytest.fixture
def make_response():
    """Factory de respostas HTTP falsas do requests"""
    def factory(status_code: int = 204, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        return response
    return factory


@pytest.fixture
def client(branding):
    """TestClient com o webhook do Discord configurado e timezone fixo"""
    def override() -> RelayService:
        return RelayService(DiscordService(webhook_url=WEBHOOK_URL), branding)

    app.dependency_overrides[get_relay_service] = override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client(branding):
    """TestClient sem URL do webhook"""
    def override() -> RelayService:
        return RelayService(DiscordService(webhook_url=None), branding)

    app.dependency_overrides[get_relay_service] = override
    yield TestClient(app)
    app.dependency_overrides.clear()
