from __future__ import annotations
import json
from typing import Any, Dict
from urllib.parse import parse_qs
from starlette.requests import Request

FORM_FIELDS = ("scenario", "userResponse")


def _as_mapping(value: Any) -> Dict[str, Any]:
	return value if isinstance(value, dict) else {}


def parse_form(raw: str) -> Dict[str, str]:
	params = parse_qs(raw, keep_blank_values=True)
	if not any(field in params for field in FORM_FIELDS):
		return {}
	return {field: params.get(field, [""])[0] for field in FORM_FIELDS}


def parse_body(raw: bytes, content_type: str = "") -> Dict[str, Any]:
	"""Normalize a request payload (JSON or form-encoded) into a dict. Never raises."""
	if "application/json" in (content_type or "").lower():
		try:
			return _as_mapping(json.loads(raw))
		except (ValueError, RecursionError):
			return {}
	text = raw.decode("utf-8", errors="replace") if raw else ""
	if not text:
		return {}
	try:
		return _as_mapping(json.loads(text))
	except (ValueError, RecursionError):
		return parse_form(text)


async def read_body(request: Request) -> Dict[str, Any]:
	try:
		raw = await request.body()
	except Exception:
		# Client disconnects surface here
		return {}
	return parse_body(raw, request.headers.get("content-type", ""))


def field_text(body: Dict[str, Any], key: str) -> str:
	"""Field as trimmed text; JSON scalars and containers keep their JSON spelling."""
	value = body.get(key)
	if value is None:
		return ""
	if isinstance(value, (bool, dict, list)):
		return json.dumps(value, ensure_ascii=False)
	return str(value).strip()
