from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from attachment_ingest_core.ocr.engine import RecognitionLevel


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # The chat UI offers 500-8000 / 0-500; any size > 0 with 0 <= overlap < size works here.
    chunk_size: int = Field(default=4000, alias="CHUNK_SIZE", gt=0)
    chunk_overlap: int = Field(default=200, alias="CHUNK_OVERLAP", ge=0)

    ocr_backend: Literal["tesseract", "llm_service"] = Field(default="tesseract", alias="OCR_BACKEND")
    ocr_recognition_level: RecognitionLevel = Field(
        default=RecognitionLevel.ACCURATE, alias="OCR_RECOGNITION_LEVEL"
    )
    ocr_languages: str = Field(default="eng", alias="OCR_LANGUAGES")

    ocr_llm_base_url: str | None = Field(default=None, alias="OCR_LLM_BASE_URL")
    ocr_llm_api_key: SecretStr | None = Field(default=None, alias="OCR_LLM_API_KEY")
    ocr_llm_engine: str = Field(default="default", alias="OCR_LLM_ENGINE")
    ocr_llm_timeout_s: float = Field(default=300.0, alias="OCR_LLM_TIMEOUT_S", gt=0)

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    @model_validator(mode="after")
    def _check_consistency(self) -> Settings:
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("CHUNK_OVERLAP must be < CHUNK_SIZE")
        if self.ocr_backend == "llm_service" and not self.ocr_llm_base_url:
            raise ValueError("OCR_LLM_BASE_URL is required when OCR_BACKEND=llm_service")
        return self


def load_settings() -> Settings:
    return Settings()
