from __future__ import annotations
import json
import logging
from pydantic import ValidationError
from .errors import EvaluationParseError
from .schemas import EvaluationResult

logger = logging.getLogger(__name__)


def _json_candidate(text: str) -> str:
	"""Slice from the first '{' to the last '}', or return the text unchanged."""
	first = text.find("{")
	last = text.rfind("}")
	if first != -1 and last != -1 and last > first:
		return text[first : last + 1]
	return text


def extract_evaluation(raw_text: str) -> EvaluationResult:
	"""
	Parse an evaluation out of model output.

	Structured output normally yields a bare JSON object, but any text the
	model wraps around it is ignored. The object must then match the
	evaluation schema exactly: missing fields, extra fields, wrong types or
	out-of-range scores all fail.

	Raises:
		EvaluationParseError: If no valid evaluation can be extracted
	"""
	candidate = _json_candidate((raw_text or "").strip())
	try:
		data = json.loads(candidate)
	except ValueError as err:
		logger.warning("Evaluation output is not valid JSON: %s", err)
		raise EvaluationParseError(f"Model did not return valid JSON: {err}") from err
	try:
		return EvaluationResult.model_validate(data)
	except ValidationError as err:
		logger.warning("Evaluation output does not match schema: %d error(s)", err.error_count())
		raise EvaluationParseError(f"Model output does not match evaluation schema: {err}") from err
