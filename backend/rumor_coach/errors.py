from __future__ import annotations
from typing import Optional


class CoachError(Exception):
	"""Base class for every failure raised by the coach service."""


class ConfigurationError(CoachError):
	pass


class UpstreamError(CoachError):
	"""The OpenAI API answered with an error or with nothing usable.

	Carries the HTTP status and raw body when there was one. The API key is
	never part of the message.
	"""

	def __init__(
		self,
		message: str,
		*,
		status_code: Optional[int] = None,
		body: Optional[str] = None,
		response_id: Optional[str] = None,
	) -> None:
		super().__init__(message)
		self.status_code = status_code
		self.body = body
		self.response_id = response_id


class MissingFieldsError(CoachError, ValueError):
	pass


class EvaluationParseError(CoachError, ValueError):
	"""Model output could not be turned into a valid evaluation."""
