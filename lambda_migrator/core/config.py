from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    openai_api_key: str | None = None
    openai_api_base: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-5.1"

    aws_region: str | None = None
    aws_profile: str | None = None

    output_dir: str = "migration_output"
    http_timeout: float = 120.0
    server_port: int = 3000

settings = Settings()
