import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from .coach import CoachService
from .middleware import EdgeCORSMiddleware
from .responses import PrettyJSONResponse, error_response
from .routers import coach
from .settings import Settings, settings

logger = logging.getLogger(__name__)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
	# Unknown paths and wrong methods look the same to callers
	if exc.status_code in (404, 405):
		return error_response("Not found", 404)
	return error_response(str(exc.detail), exc.status_code)


def create_app(config: Optional[Settings] = None, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
	config = config or settings
	logging.basicConfig(
		level=config.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)

	app = FastAPI(
		title="Rumor Coach API",
		default_response_class=PrettyJSONResponse,
		docs_url=None,
		redoc_url=None,
		openapi_url=None,
	)
	app.state.coach = CoachService(config, transport=transport)

	app.add_middleware(EdgeCORSMiddleware, origin=config.cors_origin)
	app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
	app.include_router(coach.router)

	logger.info(
		"Rumor Coach API ready (model=%s, origin=%s, openai_configured=%s)",
		config.openai_model, config.cors_origin, bool(config.openai_api_key),
	)
	return app


app = create_app()
