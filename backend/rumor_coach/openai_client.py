from __future__ import annotations
import json
import logging
import httpx
from typing import Any, Callable, Dict, Optional, Sequence, Tuple
from .errors import ConfigurationError, UpstreamError
from .schemas import PromptMessage
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

TextStrategy = Callable[[Dict[str, Any]], Optional[str]]


def text_from_output_text(data: Dict[str, Any]) -> Optional[str]:
	"""Convenience field the Responses API flattens all output text into."""
	value = data.get("output_text")
	if isinstance(value, str) and value.strip():
		return value
	return None


def text_from_output_content(data: Dict[str, Any]) -> Optional[str]:
	"""Scan output[0].content: prefer an output_text entry, else anything with text."""
	output = data.get("output")
	first = output[0] if isinstance(output, list) and output else None
	content = first.get("content") if isinstance(first, dict) else None
	if not isinstance(content, list):
		return None
	entries = [c for c in content if isinstance(c, dict) and isinstance(c.get("text"), str)]
	item = next((c for c in entries if c.get("type") == "output_text"), None)
	if item is None and entries:
		item = entries[0]
	if item is None:
		return None
	return item["text"].strip() or None


TEXT_STRATEGIES: Tuple[TextStrategy, ...] = (
	text_from_output_text,
	text_from_output_content,
)


def extract_output_text(data: Dict[str, Any], strategies: Sequence[TextStrategy] = TEXT_STRATEGIES) -> str:
	for strategy in strategies:
		text = strategy(data)
		if text:
			return text
	response_id = data.get("id") or "unknown"
	logger.warning("OpenAI response %s contained no text", response_id)
	raise UpstreamError(f"OpenAI returned no text. Response id: {response_id}", response_id=str(response_id))


class OpenAIResponsesClient:
	def __init__(
		self,
		config: Optional[Settings] = None,
		*,
		model: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.config = config or default_settings
		self.api_key = self.config.openai_api_key
		if not self.api_key:
			raise ConfigurationError("OPENAI_API_KEY is not configured")
		self.model = model or self.config.openai_model
		self.url = self.config.responses_url
		self._client = httpx.AsyncClient(timeout=self.config.openai_timeout_seconds, transport=transport)

	def build_payload(
		self,
		messages: Sequence[PromptMessage],
		*,
		schema: Optional[Dict[str, Any]] = None,
		schema_name: str = "evaluation",
	) -> Dict[str, Any]:
		payload: Dict[str, Any] = {
			"model": self.model,
			"input": [m.model_dump() for m in messages],
		}
		if schema is not None:
			payload["text"] = {
				"format": {
					"type": "json_schema",
					"name": schema_name,
					"schema": schema,
					"strict": True,
				},
			}
		return payload

	async def generate(
		self,
		messages: Sequence[PromptMessage],
		*,
		schema: Optional[Dict[str, Any]] = None,
		schema_name: str = "evaluation",
	) -> str:
		payload = self.build_payload(messages, schema=schema, schema_name=schema_name)
		headers = {
			"Authorization": f"Bearer {self.api_key}",
			"Content-Type": "application/json",
		}
		logger.info(
			"Calling OpenAI model=%s messages=%d structured=%s",
			self.model, len(messages), schema is not None,
		)
		try:
			r = await self._client.post(self.url, headers=headers, json=payload)
		except httpx.RequestError as net_err:
			raise UpstreamError(f"OpenAI request failed: {net_err}") from net_err
		raw = r.text
		if not r.is_success:
			logger.warning("OpenAI returned HTTP %d", r.status_code)
			raise UpstreamError(f"OpenAI error {r.status_code}: {raw}", status_code=r.status_code, body=raw)
		try:
			data = json.loads(raw) if raw else {}
		except ValueError as err:
			raise UpstreamError(f"Unexpected OpenAI response: {raw}", status_code=r.status_code, body=raw) from err
		if not isinstance(data, dict):
			raise UpstreamError(f"Unexpected OpenAI response: {raw}", status_code=r.status_code, body=raw)
		return extract_output_text(data)

	async def aclose(self) -> None:
		await self._client.aclose()

	async def __aenter__(self) -> "OpenAIResponsesClient":
		return self

	async def __aexit__(self, *exc_info: Any) -> None:
		await self.aclose()
