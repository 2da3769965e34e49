import logging
from fastapi import APIRouter, Depends, Request
from ..body import field_text, read_body
from ..coach import CoachService
from ..responses import PrettyJSONResponse, error_response
from ..schemas import ScenarioResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["coach"])

MISSING_FIELDS = "Missing scenario or userResponse"


def get_coach(request: Request) -> CoachService:
	return request.app.state.coach


def _server_error(exc: Exception) -> PrettyJSONResponse:
	return error_response("Server error", 500, detail=str(exc))


@router.post("/scenario")
async def generate_scenario(coach: CoachService = Depends(get_coach)):
	try:
		text = await coach.generate_scenario()
	except Exception as e:
		logger.exception("Scenario generation failed")
		return _server_error(e)
	return PrettyJSONResponse(ScenarioResponse(scenario=text).model_dump())


@router.post("/evaluate")
async def evaluate_response(request: Request, coach: CoachService = Depends(get_coach)):
	try:
		body = await read_body(request)
		scenario = field_text(body, "scenario")
		user_response = field_text(body, "userResponse")
		if not scenario or not user_response:
			return error_response(MISSING_FIELDS, 400)
		result = await coach.evaluate_response(scenario, user_response)
	except Exception as e:
		logger.exception("Evaluation failed")
		return _server_error(e)
	return PrettyJSONResponse(result.model_dump())
