import base64
import binascii
from typing import Optional

from .config import logger


AUDIO_MIME_TYPES = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "ogg": "audio/ogg",
    "aac": "audio/aac",
}


def decode_audio_data(audio_data: str) -> bytes:
    try:
        return base64.b64decode(audio_data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 audio data: {e}") from e


def sniff_audio_format(data: bytes) -> Optional[str]:
    """Guess the audio container from its leading bytes."""
    if len(data) < 4:
        return None
    if data[:4] == b"RIFF" and data[8:12] == b"WAVE":
        return "wav"
    if data[:4] == b"OggS":
        return "ogg"
    if data[:3] == b"ID3":
        return "mp3"
    if data[4:8] == b"ftyp":
        return "aac"
    if data[0] == 0xFF:
        # ADTS uses layer bits 00; MPEG audio layer III uses 01
        if data[1] & 0xF6 == 0xF0:
            return "aac"
        if data[1] & 0xE0 == 0xE0:
            return "mp3"
    logger.debug(f"Unrecognized audio header: {data[:4].hex()}")
    return None


def audio_mime_type(audio_format: str) -> str:
    return AUDIO_MIME_TYPES.get(audio_format, "application/octet-stream")
