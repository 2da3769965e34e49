from typing import Callable
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from .responses import cors_headers


class EdgeCORSMiddleware(BaseHTTPMiddleware):
	"""
	Answers every OPTIONS request as a CORS preflight (any path, no Origin
	required) and stamps CORS headers on every other response.
	"""

	def __init__(self, app: ASGIApp, origin: str = "*") -> None:
		super().__init__(app)
		self.headers = cors_headers(origin or "*")

	async def dispatch(self, request: Request, call_next: Callable) -> Response:
		if request.method == "OPTIONS":
			return Response(status_code=204, headers=self.headers)
		response = await call_next(request)
		for key, value in self.headers.items():
			response.headers[key] = value
		return response
