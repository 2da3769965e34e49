from __future__ import annotations
import logging
from typing import List, Optional
import httpx
from .errors import MissingFieldsError
from .extraction import extract_evaluation
from .openai_client import OpenAIResponsesClient
from .schemas import EVALUATION_JSON_SCHEMA, EvaluationResult, PromptMessage
from .settings import Settings

logger = logging.getLogger(__name__)


def _build_scenario_messages() -> List[PromptMessage]:
	return [
		PromptMessage(
			role="system",
			content=(
				"Eres un simulador clínico de conversaciones para entrenar comunicación interpersonal. "
				"Escribe en español, natural, realista."
			),
		),
		PromptMessage(
			role="user",
			content=(
				'Genera: "Una situación dentro de un hospital sobre un chisme o una cosa parecida". '
				"Debe ser breve (80-140 palabras), realista, y terminar con una frase que invite a responder. "
				"No uses nombres reales. No incluyas contenido sexual explícito."
			),
		),
	]


def _build_evaluation_messages(scenario: str, user_response: str) -> List[PromptMessage]:
	return [
		PromptMessage(
			role="system",
			content=(
				"Evalúas una respuesta del usuario ante un rumor/chisme en un hospital. "
				"Devuelve SOLO un JSON válido según el esquema. "
				"Criterios: tacto (respeto, no avivar rumor), calidez (empatía), "
				"elementos comunicativos (escucha, claridad, validación, límites, confidencialidad). "
				"Incluye 2-3 mejoras concretas y una versión alternativa breve de respuesta (1-2 frases) "
				'dentro de "feedback".'
			),
		),
		PromptMessage(
			role="user",
			content=f"Situación:\n{scenario}\n\nRespuesta del usuario:\n{user_response}",
		),
	]


class CoachService:
	"""Scenario generation and reply evaluation on top of the OpenAI Responses API.

	Configuration is fixed at construction. A fresh upstream client is opened
	for every call, so a missing API key only fails when a call is made.
	"""

	def __init__(self, config: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
		self.config = config
		self._transport = transport

	def _client(self) -> OpenAIResponsesClient:
		return OpenAIResponsesClient(self.config, transport=self._transport)

	async def generate_scenario(self) -> str:
		async with self._client() as client:
			return await client.generate(_build_scenario_messages())

	async def evaluate_response(self, scenario: str, user_response: str) -> EvaluationResult:
		scenario = (scenario or "").strip()
		user_response = (user_response or "").strip()
		if not scenario or not user_response:
			raise MissingFieldsError("Missing scenario or userResponse")
		async with self._client() as client:
			text = await client.generate(
				_build_evaluation_messages(scenario, user_response),
				schema=EVALUATION_JSON_SCHEMA,
				schema_name="evaluation",
			)
		result = extract_evaluation(text)
		logger.info("Evaluation scored %d", result.score)
		return result
