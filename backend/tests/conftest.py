"""
Shared fixtures: explicit settings and a fake OpenAI Responses API.
"""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from rumor_coach.main import create_app
from rumor_coach.settings import Settings


EVALUATION: Dict[str, Any] = {
	"score": 80,
	"breakdown": {"tacto": 80, "calidez": 80, "elementos": 80},
	"feedback": "ok",
}


def make_settings(**overrides: Any) -> Settings:
	"""Build settings without touching the process environment or .env."""
	values: Dict[str, Any] = {
		"OPENAI_API_KEY": "sk-test",
		"OPENAI_MODEL": "gpt-4.1-mini",
		"OPENAI_BASE_URL": "https://api.openai.test/v1",
		"ALLOWED_ORIGIN": "*",
		"LOG_LEVEL": "WARNING",
	}
	values.update(overrides)
	return Settings(_env_file=None, **values)


class FakeOpenAI:
	"""Records requests and answers each with the same canned response."""

	def __init__(self, status_code: int = 200, body: Optional[Dict[str, Any]] = None, raw: Optional[str] = None):
		self.status_code = status_code
		self.body = body
		self.raw = raw
		self.requests: List[httpx.Request] = []

	def __call__(self, request: httpx.Request) -> httpx.Response:
		self.requests.append(request)
		if self.raw is not None:
			return httpx.Response(self.status_code, text=self.raw)
		return httpx.Response(self.status_code, json=self.body if self.body is not None else {})

	@property
	def transport(self) -> httpx.MockTransport:
		return httpx.MockTransport(self)

	def payload(self, index: int = -1) -> Dict[str, Any]:
		return json.loads(self.requests[index].content)


def output_text_body(text: str, response_id: str = "resp_123") -> Dict[str, Any]:
	return {"id": response_id, "object": "response", "output_text": text}


@pytest.fixture
def settings() -> Settings:
	return make_settings()


@pytest.fixture
def fake_openai() -> FakeOpenAI:
	return FakeOpenAI(body=output_text_body("Situación de prueba."))


@pytest.fixture
def client(settings, fake_openai) -> TestClient:
	return TestClient(create_app(settings, transport=fake_openai.transport))
