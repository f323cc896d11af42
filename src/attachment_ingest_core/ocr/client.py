from __future__ import annotations

import base64
import io
from dataclasses import dataclass
from typing import Any

import httpx
from PIL import Image

from attachment_ingest_core.ocr.engine import RecognitionLevel, RecognizedText, TextRegion

DEFAULT_OCR_PROMPT = "Read all text in the image. Output plain text only, one line per line of text."


@dataclass(frozen=True)
class OcrEngineSpec:
    """
    Engine name as configured on the LLM service.

    The OpenAI-compatible model id is `ocr/<engine>`.
    """

    engine: str

    @property
    def openai_model(self) -> str:
        return f"ocr/{self.engine}"


def _image_data_url(png_bytes: bytes) -> str:
    b64 = base64.b64encode(png_bytes).decode("ascii")
    return f"data:image/png;base64,{b64}"


def _png_bytes(image: Image.Image) -> bytes:
    if image.mode not in {"1", "L", "LA", "P", "RGB", "RGBA"}:
        image = image.convert("RGB")
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def _extract_message_content(payload: dict[str, Any]) -> str:
    choices = payload.get("choices") or []
    if not isinstance(choices, list) or not choices:
        raise RuntimeError("OpenAI response missing choices")
    first = choices[0] if isinstance(choices[0], dict) else {}
    msg = first.get("message") if isinstance(first.get("message"), dict) else {}
    content = msg.get("content")
    if isinstance(content, str):
        # Blank images legitimately come back empty.
        return content.strip()
    text = first.get("text")
    if isinstance(text, str):
        return text.strip()
    return ""


@dataclass(frozen=True)
class LlmServiceClient:
    base_url: str
    api_key: str | None = None
    timeout_s: float = 300.0
    transport: httpx.BaseTransport | None = None

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    def chat_completion(
        self,
        *,
        model: str,
        messages: list[dict[str, Any]],
        max_tokens: int = 2048,
        temperature: float = 0.0,
    ) -> str:
        """
        POST `/v1/chat/completions` and return the first message content.
        """
        body = {
            "model": model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        url = self.base_url.rstrip("/") + "/v1/chat/completions"
        with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
            r = client.post(url, headers=self._headers(), json=body)
            r.raise_for_status()
            return _extract_message_content(r.json())


@dataclass(frozen=True)
class LlmServiceOcrEngine:
    """
    OCR through a vision model served behind an OpenAI-compatible API.

    Each non-empty line of the reply becomes one region with a single candidate.
    `fast_engine`, when set, serves `RecognitionLevel.FAST` requests.
    """

    client: LlmServiceClient
    engine: OcrEngineSpec
    fast_engine: OcrEngineSpec | None = None
    prompt: str = DEFAULT_OCR_PROMPT
    max_tokens: int = 2048

    def _engine_for(self, level: RecognitionLevel) -> OcrEngineSpec:
        if level is RecognitionLevel.FAST and self.fast_engine is not None:
            return self.fast_engine
        return self.engine

    def recognize(self, image: Image.Image, *, level: RecognitionLevel) -> list[TextRegion]:
        reply = self.client.chat_completion(
            model=self._engine_for(level).openai_model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": _image_data_url(_png_bytes(image))},
                        },
                        {"type": "text", "text": self.prompt},
                    ],
                }
            ],
            max_tokens=self.max_tokens,
        )
        return [
            TextRegion(candidates=(RecognizedText(text=line.strip(), confidence=1.0),))
            for line in reply.splitlines()
            if line.strip()
        ]
