import time
from typing import Any, Dict, List, Mapping, Optional, Type, Union

import httpx
from pydantic import ValidationError

from .base import SynthesisError, TTSVendorAdapter, VendorError, VoiceCatalogError
from ..config import SPEECHIFY_BASE_URL, SPEECHIFY_TIMEOUT, logger, debug_log
from ..models import SynthesisRequest, SynthesisResult, Voice


ENGLISH_MODEL = "simba-english"
MULTILINGUAL_MODEL = "simba-multilingual"
DEFAULT_VOICE_ID = "scott"
UNKNOWN_LANGUAGE = "unknown"

SPEECH_PATH = "/v1/audio/speech"
VOICES_PATH = "/v1/voices"


def select_model(language: Optional[str]) -> str:
    """Pick the Speechify model variant for a language tag.

    English tags ("en", "en-US", ...) get the English-only model; everything
    else, including a missing tag, gets the multilingual one.
    """
    if language and (language == "en" or language.startswith("en")):
        return ENGLISH_MODEL
    return MULTILINGUAL_MODEL


def map_gender(gender: Any) -> str:
    if gender == "male":
        return "male"
    if gender == "female":
        return "female"
    return "other"


def resolve_voice_language(record: Mapping[str, Any]) -> str:
    """locale -> first model's first language -> "unknown"."""
    locale = record.get("locale")
    if locale:
        return locale
    models = record.get("models") or []
    if isinstance(models, list) and models and isinstance(models[0], Mapping):
        languages = models[0].get("languages") or []
        if isinstance(languages, list) and languages and isinstance(languages[0], Mapping):
            first = languages[0].get("locale")
            if first:
                return first
    return UNKNOWN_LANGUAGE


def normalize_voice(record: Mapping[str, Any]) -> Voice:
    return Voice(
        id=record["id"],
        name=record.get("display_name") or record["id"],
        language=resolve_voice_language(record),
        gender=map_gender(record.get("gender")),
    )


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def _raise_for_status(resp: httpx.Response) -> None:
    if resp.status_code >= 400:
        raise httpx.HTTPStatusError(f"HTTP {resp.status_code}: {resp.text}", request=resp.request, response=resp)


class SpeechifyAdapter(TTSVendorAdapter):
    """Speechify TTS adapter.

    Holds only immutable configuration; every call opens its own HTTP client,
    so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = SPEECHIFY_BASE_URL,
        timeout: float = SPEECHIFY_TIMEOUT,
        default_voice: str = DEFAULT_VOICE_ID,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_voice = default_voice
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {"Authorization": f"Bearer {(self.api_key or '').strip()}", "Content-Type": "application/json"}
        return httpx.AsyncClient(base_url=self.base_url, headers=headers, timeout=self.timeout, transport=self._transport)

    def _require_api_key(self, error_cls: Type[VendorError], prefix: str) -> None:
        api_key = (self.api_key or "").strip()
        if not api_key or api_key.lower().startswith("dummy"):
            logger.error("Speechify API key not configured")
            raise error_cls(f"{prefix}: Speechify API key not configured")

    @staticmethod
    def _coerce_request(request: Union[SynthesisRequest, Mapping[str, Any]]) -> SynthesisRequest:
        if isinstance(request, SynthesisRequest):
            return request
        try:
            return SynthesisRequest.model_validate(dict(request))
        except (ValidationError, TypeError, ValueError) as e:
            raise SynthesisError(f"Speechify TTS error: invalid request: {e}") from e

    def build_speech_payload(self, request: SynthesisRequest) -> Dict[str, Any]:
        """Translate a request into the Speechify body. Legacy fields never make it in."""
        payload: Dict[str, Any] = {
            "input": request.text,
            "voice_id": request.voice or self.default_voice,
            "audio_format": request.format,
            "model": select_model(request.language),
            "options": {"loudness_normalization": True, "text_normalization": True},
        }
        if request.language:
            payload["language"] = request.language
        return payload

    async def synthesize(self, request: Union[SynthesisRequest, Mapping[str, Any]]) -> SynthesisResult:
        req = self._coerce_request(request)
        if not req.text:
            logger.error("Speechify synthesis rejected: input text is empty")
            raise SynthesisError("Speechify TTS error: input text is empty")
        self._require_api_key(SynthesisError, "Speechify TTS error")

        payload = self.build_speech_payload(req)
        debug_log(f"Speechify synthesize called with: voice={payload['voice_id']}, model={payload['model']}, format={req.format}, language={req.language}")
        req_time = time.perf_counter()
        try:
            async with self._client() as client:
                resp = await client.post(SPEECH_PATH, json=payload)
                _raise_for_status(resp)
                body = resp.json()
            if not isinstance(body, dict) or not body.get("audio_data"):
                raise ValueError("response did not contain audio data")
            result = SynthesisResult(
                audio_data=body["audio_data"],
                format=req.format,
                speech_marks=body.get("speech_marks"),
                billable_characters_count=body.get("billable_characters_count"),
            )
        except Exception as e:
            logger.error(f"Speechify synthesis error: {_describe(e)}")
            raise SynthesisError(f"Speechify TTS error: {_describe(e)}") from e
        latency = time.perf_counter() - req_time
        logger.info(f"Speechify TTS API latency: {latency:.3f}s, model: {payload['model']} for text length: {len(req.text)}")
        return result

    async def list_voices(self) -> List[Voice]:
        self._require_api_key(VoiceCatalogError, "Speechify voices error")
        req_time = time.perf_counter()
        try:
            async with self._client() as client:
                resp = await client.get(VOICES_PATH)
                _raise_for_status(resp)
                records = resp.json()
            if not isinstance(records, list):
                raise ValueError(f"unexpected voices payload of type {type(records).__name__}")
            voices = [normalize_voice(record) for record in records]
        except Exception as e:
            logger.error(f"Speechify voices error: {_describe(e)}")
            raise VoiceCatalogError(f"Speechify voices error: {_describe(e)}") from e
        logger.info(f"Speechify voices API latency: {time.perf_counter() - req_time:.3f}s, {len(voices)} voices")
        return voices
