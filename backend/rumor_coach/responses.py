from __future__ import annotations
import json
from typing import Any, Dict
from fastapi.responses import JSONResponse


def cors_headers(origin: str) -> Dict[str, str]:
	return {
		"Access-Control-Allow-Origin": origin,
		"Access-Control-Allow-Methods": "POST, OPTIONS",
		"Access-Control-Allow-Headers": "Content-Type",
	}


class PrettyJSONResponse(JSONResponse):
	"""JSON body indented by two spaces, non-ASCII (Spanish feedback) kept readable."""

	def render(self, content: Any) -> bytes:
		return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def error_response(error: str, status_code: int, detail: str | None = None) -> PrettyJSONResponse:
	content: Dict[str, Any] = {"error": error}
	if detail is not None:
		content["detail"] = detail
	return PrettyJSONResponse(content, status_code=status_code)
