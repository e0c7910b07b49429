# config/settings.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	"""
	Process wide configuration, read once from the environment and the `.env` file.
	Field names map to upper-case environment variables (`jwt_secret` -> `JWT_SECRET`).
	"""
	model_config = SettingsConfigDict(
		env_file=".env",
		env_file_encoding="utf-8",
		extra="ignore",
		frozen=True
	)

	# Token settings
	jwt_secret: str
	jwt_algorithm: str = "HS256"
	token_ttl_minutes: int = 60

	# Database settings
	mongo_uri: str = "mongodb://127.0.0.1:27017/"
	mongo_db: str = "homecare"

	# Pagination settings
	default_page: int = 1
	default_limit: int = 10

	log_level: str = "INFO"

# Created on import so a missing JWT_SECRET stops the process at start
settings = Settings()  # type: ignore
