"""
Pytest configuration and shared fixtures for the translation proxy tests.
"""
import os
import sys
import json
import pytest
import httpx

# Add lambda directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings


@pytest.fixture
def settings():
    """Settings with a dummy key pointing at a fake Gemini host."""
    return Settings(
        api_key="test-key",
        model="test-model",
        api_base="https://gemini.test/v1beta",
        timeout_seconds=5.0,
    )


@pytest.fixture
def haus_translation():
    return {
        "germanWord": "das Haus",
        "englishTranslation": "the house",
        "details": "die Häuser",
    }


@pytest.fixture
def gemini_reply():
    """Build a generateContent reply whose generated text is the given string."""
    def _build(text):
        return {
            "candidates": [
                {
                    "content": {"parts": [{"text": text}], "role": "model"},
                    "finishReason": "STOP",
                }
            ]
        }
    return _build


@pytest.fixture
def upstream():
    """
    Records outbound requests and answers them with a configurable handler.
    Assign `upstream.handler` to a callable taking an httpx.Request.
    """
    class Upstream:
        def __init__(self):
            self.requests = []
            self.handler = lambda request: httpx.Response(500, text="no handler set")

        def __call__(self, request):
            self.requests.append(request)
            return self.handler(request)

        def reply_json(self, body, status_code=200):
            self.handler = lambda request: httpx.Response(status_code, json=body)

        def last_payload(self):
            return json.loads(self.requests[-1].content)

    return Upstream()


@pytest.fixture
def mock_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream))
