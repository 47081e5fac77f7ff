"""
Integration tests for the face comparison API.
Uses TestClient with the real workflow and mocked external collaborators.
"""
from unittest.mock import MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi import FastAPI
from fastapi.testclient import TestClient

from face_gate.api.middleware import BodySizeLimitMiddleware
from face_gate.application.use_cases.access.compare_face import CompareFaceUseCase
from face_gate.domain.constants import NotificationMessages
from face_gate.domain.exceptions import ComparisonError
from face_gate.domain.models import ComparisonResult
from face_gate.infrastructure.messaging import RabbitMQPublisher


@pytest.fixture
def mock_container(compare_use_case, publisher):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        CompareFaceUseCase: compare_use_case,
        RabbitMQPublisher: publisher,
    }.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from face_gate.main import app

    with patch("face_gate.api.v1.compare_controller.get_container", return_value=mock_container), \
            patch("face_gate.api.v1.health_controller.get_container", return_value=mock_container), \
            patch("face_gate.main.get_container", return_value=mock_container):
        with TestClient(app) as c:
            yield c


class TestCompareAPI:
    """Tests for POST /compare"""

    def test_match_opens_door(self, client, source_image_b64, comparison_client, actuator_client, publisher):
        comparison_client.compare.return_value = ComparisonResult(matched=True, similarity=93.0)

        response = client.post("/compare", json={"base64": source_image_b64, "token": "abc"})

        assert response.status_code == 200
        assert response.json() == {"match": True, "similarity": 93}
        actuator_client.unlock.assert_called_once()
        actuator_client.sound_alarm.assert_not_called()
        publisher.publish.assert_awaited_once_with("abc", NotificationMessages.DOOR_OPENED)

    def test_no_match_sounds_alarm(self, client, source_image_b64, comparison_client, actuator_client, publisher):
        comparison_client.compare.return_value = ComparisonResult(matched=False)

        response = client.post("/compare", json={"base64": source_image_b64, "token": "xyz"})

        assert response.status_code == 200
        assert response.json() == {"match": False, "similarity": 0}
        actuator_client.sound_alarm.assert_called_once()
        actuator_client.unlock.assert_not_called()
        publisher.publish.assert_awaited_once_with("xyz", NotificationMessages.ALARM_TRIGGERED)

    @pytest.mark.parametrize("body", [{"token": "abc"}, {"base64": "", "token": "abc"}, {}])
    def test_missing_image_returns_400(self, client, body, comparison_client, actuator_client, publisher):
        response = client.post("/compare", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Se requiere una imagen en base64"}
        comparison_client.compare.assert_not_called()
        actuator_client.unlock.assert_not_called()
        actuator_client.sound_alarm.assert_not_called()
        publisher.publish.assert_not_called()

    def test_invalid_base64_returns_400(self, client, publisher):
        response = client.post("/compare", json={"base64": "%%%", "token": "abc"})

        assert response.status_code == 400
        assert "error" in response.json()
        publisher.publish.assert_not_called()

    def test_malformed_body_returns_400(self, client, publisher):
        response = client.post(
            "/compare", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        publisher.publish.assert_not_called()

    def test_provider_failure_returns_500(
        self, client, source_image_b64, comparison_client, actuator_client, publisher
    ):
        comparison_client.compare.side_effect = ComparisonError("The security token included in the request is invalid.")

        response = client.post("/compare", json={"base64": source_image_b64, "token": "abc"})

        assert response.status_code == 500
        assert response.json() == {
            "error": True,
            "message": "The security token included in the request is invalid.",
        }
        actuator_client.unlock.assert_not_called()
        actuator_client.sound_alarm.assert_not_called()
        publisher.publish.assert_not_called()

    def test_queue_down_still_returns_result(self, client, source_image_b64, publisher):
        publisher.publish.return_value = False

        response = client.post("/compare", json={"base64": source_image_b64, "token": "abc"})

        assert response.status_code == 200
        assert response.json()["match"] is True

    def test_repeated_requests_are_not_deduplicated(
        self, client, source_image_b64, comparison_client, actuator_client, publisher
    ):
        body = {"base64": source_image_b64, "token": "abc"}

        client.post("/compare", json=body)
        client.post("/compare", json=body)

        assert comparison_client.compare.await_count == 2
        assert actuator_client.unlock.call_count == 2
        assert publisher.publish.await_count == 2


class TestLifespan:
    """Startup and shutdown wiring"""

    def test_publisher_started_and_closed(self, mock_container, publisher):
        from face_gate.main import app

        with patch("face_gate.main.get_container", return_value=mock_container):
            with TestClient(app):
                publisher.start.assert_called_once()
                publisher.close.assert_not_called()

        publisher.close.assert_awaited_once()

    def test_health_reports_queue_state(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "queue": "ready"}


class TestBodySizeLimit:
    """Tests for BodySizeLimitMiddleware"""

    @pytest.fixture
    def small_app_client(self):
        app = FastAPI()
        app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=64)

        @app.post("/echo")
        async def echo(payload: dict) -> dict:
            return payload

        with TestClient(app) as c:
            yield c

    def test_body_within_limit_passes(self, small_app_client):
        response = small_app_client.post("/echo", json={"a": 1})
        assert response.status_code == 200

    def test_body_over_limit_rejected(self, small_app_client):
        response = small_app_client.post("/echo", json={"base64": "A" * 200})
        assert response.status_code == 413
        assert response.json() == {"error": "Payload demasiado grande"}

    def test_chunked_body_over_limit_rejected(self, small_app_client):
        def chunks():
            yield b'{"base64": "'
            for _ in range(50):
                yield b"A" * 100
            yield b'"}'

        response = small_app_client.post(
            "/echo", content=chunks(), headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 413
        assert response.json() == {"error": "Payload demasiado grande"}

    def test_chunked_body_within_limit_reaches_route(self, small_app_client):
        def chunks():
            yield b'{"a": '
            yield b"1}"

        response = small_app_client.post(
            "/echo", content=chunks(), headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 200
        assert response.json() == {"a": 1}
