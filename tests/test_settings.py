import pytest
from pydantic import ValidationError

from attachment_ingest_core.config import Settings, load_settings
from attachment_ingest_core.ocr.engine import RecognitionLevel


def test_settings_defaults() -> None:
    settings = Settings.model_validate({})
    assert settings.chunk_size == 4000
    assert settings.chunk_overlap == 200
    assert settings.ocr_backend == "tesseract"
    assert settings.ocr_recognition_level is RecognitionLevel.ACCURATE


def test_settings_parses_aliases() -> None:
    settings = Settings.model_validate(
        {
            "CHUNK_SIZE": "8000",
            "CHUNK_OVERLAP": "500",
            "OCR_RECOGNITION_LEVEL": "fast",
            "OCR_LLM_API_KEY": "abc",
        }
    )
    assert settings.chunk_size == 8000
    assert settings.chunk_overlap == 500
    assert settings.ocr_recognition_level is RecognitionLevel.FAST
    assert settings.ocr_llm_api_key is not None
    assert settings.ocr_llm_api_key.get_secret_value() == "abc"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHUNK_SIZE", "1200")
    monkeypatch.setenv("LOG_JSON", "false")
    settings = load_settings()
    assert settings.chunk_size == 1200
    assert settings.log_json is False


@pytest.mark.parametrize(
    "values",
    [
        {"CHUNK_SIZE": 0},
        {"CHUNK_OVERLAP": -1},
        {"CHUNK_SIZE": 100, "CHUNK_OVERLAP": 100},
        {"OCR_BACKEND": "llm_service"},
        {"OCR_BACKEND": "vision"},
    ],
)
def test_settings_rejects_invalid_values(values: dict) -> None:
    with pytest.raises(ValidationError):
        Settings.model_validate(values)
