from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str

    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRES_IN: int = 60

    project_root: Path = Path(__file__).parent.parent.resolve()

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    STORAGE_BACKEND: Literal["local", "s3"] = "local"

    IMAGES_FOLDER: Path = Path("./static/images")
    IMAGES_BASE_URL: str = "/image"

    S3_BUCKET: str = "nust-competition-images"
    S3_REGION: str = "us-east-1"
    S3_ENDPOINT_URL: str | None = None

    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
