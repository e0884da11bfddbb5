from typing import Any, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


AudioFormat = Literal["mp3", "wav", "ogg", "aac"]
Gender = Literal["male", "female", "other"]


class SynthesisRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str
    voice: Optional[str] = None
    language: Optional[str] = None
    format: AudioFormat = "mp3"
    # Legacy ElevenLabs voice settings, accepted and ignored
    stability: Optional[float] = None
    similarity_boost: Optional[float] = None
    style: Optional[float] = None
    use_speaker_boost: Optional[bool] = None


class SynthesisResult(BaseModel):
    audio_data: str  # base64 encoded audio
    format: AudioFormat
    speech_marks: Optional[Any] = None
    billable_characters_count: Optional[int] = Field(default=None, ge=0)


class Voice(BaseModel):
    id: str
    name: str
    language: str
    gender: Gender
