from __future__ import annotations
from typing import Any, Dict, Literal
from pydantic import BaseModel, ConfigDict, Field


class PromptMessage(BaseModel):
	model_config = ConfigDict(frozen=True)

	role: Literal["system", "user"]
	content: str


# Rubric axis / overall score: integer in [1, 100]
_SCORE = {"type": "integer", "minimum": 1, "maximum": 100}

# Sent upstream as a strict structured-output constraint
EVALUATION_JSON_SCHEMA: Dict[str, Any] = {
	"type": "object",
	"additionalProperties": False,
	"properties": {
		"score": dict(_SCORE),
		"breakdown": {
			"type": "object",
			"additionalProperties": False,
			"properties": {
				"tacto": dict(_SCORE),
				"calidez": dict(_SCORE),
				"elementos": dict(_SCORE),
			},
			"required": ["tacto", "calidez", "elementos"],
		},
		"feedback": {"type": "string"},
	},
	"required": ["score", "breakdown", "feedback"],
}


class Breakdown(BaseModel):
	model_config = ConfigDict(extra="forbid", strict=True)

	tacto: int = Field(ge=1, le=100)
	calidez: int = Field(ge=1, le=100)
	elementos: int = Field(ge=1, le=100)


class EvaluationResult(BaseModel):
	"""Local mirror of EVALUATION_JSON_SCHEMA.

	Strict mode: "80", 80.0 and true are rejected rather than coerced.
	"""

	model_config = ConfigDict(extra="forbid", strict=True)

	score: int = Field(ge=1, le=100)
	breakdown: Breakdown
	feedback: str


class ScenarioResponse(BaseModel):
	scenario: str
