"""
Tests for the Discord webhook client
"""
from unittest.mock import patch

import pytest
import requests

from app.services.discord_service import (
    DiscordConfigError,
    DiscordNetworkError,
    DiscordRejectedError,
    DiscordService,
    DiscordServiceError,
    get_discord_service,
)


WEBHOOK_URL = "https://discord.test/api/webhooks/123/token"
MESSAGE = {"username": "Zammad", "embeds": []}


class TestSendMessage:
    """Envio de uma mensagem ao webhook"""

    def test_posts_json_to_webhook(self, make_response):
        service = DiscordService(webhook_url=WEBHOOK_URL, timeout=5)

        with patch("app.services.discord_service.requests.post") as mock_post:
            mock_post.return_value = make_response(204)
            service.send_message(MESSAGE)

        mock_post.assert_called_once_with(
            WEBHOOK_URL,
            json=MESSAGE,
            headers={"Content-Type": "application/json"},
            timeout=5,
        )

    def test_rejected_status_raises(self, make_response):
        service = DiscordService(webhook_url=WEBHOOK_URL)

        with patch("app.services.discord_service.requests.post") as mock_post:
            mock_post.return_value = make_response(400, '{"message": "Invalid Form Body"}')
            with pytest.raises(DiscordRejectedError) as exc_info:
                service.send_message(MESSAGE)

        assert exc_info.value.status_code == 400
        assert exc_info.value.body == '{"message": "Invalid Form Body"}'
        assert "400" in str(exc_info.value)

    def test_server_error_raises_rejected(self, make_response):
        service = DiscordService(webhook_url=WEBHOOK_URL)

        with patch("app.services.discord_service.requests.post") as mock_post:
            mock_post.return_value = make_response(502, "Bad Gateway")
            with pytest.raises(DiscordRejectedError):
                service.send_message(MESSAGE)

    def test_connection_error_is_wrapped(self):
        service = DiscordService(webhook_url=WEBHOOK_URL)

        with patch("app.services.discord_service.requests.post") as mock_post:
            mock_post.side_effect = requests.ConnectionError("connection refused")
            with pytest.raises(DiscordNetworkError) as exc_info:
                service.send_message(MESSAGE)

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_timeout_is_wrapped(self):
        service = DiscordService(webhook_url=WEBHOOK_URL)

        with patch("app.services.discord_service.requests.post") as mock_post:
            mock_post.side_effect = requests.Timeout("read timeout")
            with pytest.raises(DiscordNetworkError):
                service.send_message(MESSAGE)

    def test_missing_url_fails_before_request(self):
        service = DiscordService(webhook_url=None)

        with patch("app.services.discord_service.requests.post") as mock_post:
            with pytest.raises(DiscordConfigError):
                service.send_message(MESSAGE)

        mock_post.assert_not_called()

    def test_empty_url_fails_before_request(self):
        service = DiscordService(webhook_url="")

        with patch("app.services.discord_service.requests.post") as mock_post:
            with pytest.raises(DiscordConfigError):
                service.send_message(MESSAGE)

        mock_post.assert_not_called()

    def test_errors_share_base_class(self):
        assert issubclass(DiscordConfigError, DiscordServiceError)
        assert issubclass(DiscordRejectedError, DiscordServiceError)
        assert issubclass(DiscordNetworkError, DiscordServiceError)
        assert issubclass(DiscordServiceError, RuntimeError)


class TestConfiguration:
    """Leitura da URL do webhook"""

    def test_is_configured(self):
        assert DiscordService(webhook_url=WEBHOOK_URL).is_configured
        assert not DiscordService(webhook_url=None).is_configured
        assert not DiscordService(webhook_url="").is_configured

    def test_dependency_reads_env_per_call(self, monkeypatch):
        monkeypatch.delenv("DISCORD_WEBHOOK_URL", raising=False)
        assert get_discord_service().webhook_url is None

        monkeypatch.setenv("DISCORD_WEBHOOK_URL", WEBHOOK_URL)
        assert get_discord_service().webhook_url == WEBHOOK_URL

    def test_blank_env_is_unset(self, monkeypatch):
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "")

        assert not get_discord_service().is_configured
