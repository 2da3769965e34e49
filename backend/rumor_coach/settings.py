from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	openai_api_key: str | None = Field(default=None, validation_alias="OPENAI_API_KEY")
	# Model used for both scenario generation and evaluation
	openai_model: str = Field(default="gpt-4.1-mini", validation_alias="OPENAI_MODEL")
	# Responses API lives at {base_url}/responses
	openai_base_url: str = Field(default="https://api.openai.com/v1", validation_alias="OPENAI_BASE_URL")
	openai_timeout_seconds: float = Field(default=60.0, validation_alias="OPENAI_TIMEOUT_SECONDS")

	# CORS: single origin allowed to call the API from a browser
	allowed_origin: str = Field(default="*", validation_alias="ALLOWED_ORIGIN")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

	@property
	def cors_origin(self) -> str:
		return self.allowed_origin or "*"

	@property
	def responses_url(self) -> str:
		return f"{self.openai_base_url.rstrip('/')}/responses"

settings = Settings()
