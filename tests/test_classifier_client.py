import json

import httpx
import pytest

from hrscore.clients.classifier import ClassifierClient
from hrscore.exceptions import ExternalServiceError
from helpers import make_samples


def make_client(handler) -> ClassifierClient:
    return ClassifierClient(
        "http://classifier.test/",
        api_key="secret",
        timeout=2.0,
        transport=httpx.MockTransport(handler),
    )


async def test_classify_sends_request_and_parses_response():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["api_key"] = request.headers.get("X-API-Key")
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"prediction": "strength", "confidence": 0.87})

    async with make_client(handler) as client:
        result = await client.classify_workout(
            make_samples([(0, 100), (5, 101.6)]), user_resting_hr=60, user_max_hr=200
        )

    assert result.prediction == "strength"
    assert result.confidence == pytest.approx(0.87)
    assert captured["url"] == "http://classifier.test/classify"
    assert captured["api_key"] == "secret"
    body = captured["body"]
    assert body["user_resting_hr"] == 60
    assert body["user_max_hr"] == 200
    assert "activity_type" not in body
    assert body["heart_rate_data"] == [
        {"timestamp": "2025-07-14T15:34:00+00:00", "heart_rate": 100},
        {"timestamp": "2025-07-14T15:34:05+00:00", "heart_rate": 101},
    ]


async def test_activity_type_is_sent_when_given():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"prediction": "cardio", "confidence": 0.5})

    async with make_client(handler) as client:
        await client.classify_workout(make_samples([(0, 100)]), 60, 200, activity_type="running")

    assert captured["body"]["activity_type"] == "running"


async def test_connection_refused_raises_external_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(ExternalServiceError):
            await client.classify_workout(make_samples([(0, 100)]), 60, 200)


async def test_timeout_raises_external_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with make_client(handler) as client:
        with pytest.raises(ExternalServiceError, match="timed out"):
            await client.classify_workout(make_samples([(0, 100)]), 60, 200)


async def test_error_status_raises_with_status_code():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="model not loaded")

    async with make_client(handler) as client:
        with pytest.raises(ExternalServiceError) as exc_info:
            await client.classify_workout(make_samples([(0, 100)]), 60, 200)

    assert exc_info.value.status_code == 503


async def test_malformed_response_raises_external_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="not json")

    async with make_client(handler) as client:
        with pytest.raises(ExternalServiceError):
            await client.classify_workout(make_samples([(0, 100)]), 60, 200)


async def test_out_of_range_confidence_is_rejected():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"prediction": "hiit", "confidence": 4.2})

    async with make_client(handler) as client:
        with pytest.raises(ExternalServiceError):
            await client.classify_workout(make_samples([(0, 100)]), 60, 200)


async def test_ping():
    def healthy(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/health"
        return httpx.Response(200, json={"status": "ok"})

    def refused(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async with make_client(healthy) as client:
        assert await client.ping() is True
    async with make_client(refused) as client:
        assert await client.ping() is False
