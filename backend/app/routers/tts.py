from typing import List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..config import logger
from ..models import SynthesisRequest, SynthesisResult, Voice
from ..utils import audio_mime_type, decode_audio_data
from ..vendors import SynthesisError, VoiceCatalogError, legacy_tts_provider, select_model


router = APIRouter(prefix="/api/tts", tags=["tts"])


async def synthesize_internal(request: SynthesisRequest) -> SynthesisResult:
    if not request.text:
        raise HTTPException(status_code=400, detail="Text must not be empty")
    try:
        return await legacy_tts_provider.synthesize(request)
    except SynthesisError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/synthesize", response_model=SynthesisResult)
async def synthesize(request: SynthesisRequest):
    return await synthesize_internal(request)


@router.post("/audio")
async def synthesize_audio(request: SynthesisRequest):
    result = await synthesize_internal(request)
    try:
        content = decode_audio_data(result.audio_data)
    except ValueError as e:
        logger.error(f"Speechify returned undecodable audio: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    return Response(content=content, media_type=audio_mime_type(result.format))


@router.get("/voices", response_model=List[Voice])
async def list_voices(language: Optional[str] = None):
    try:
        voices = await legacy_tts_provider.list_voices()
    except VoiceCatalogError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if language:
        prefix = language.lower()
        voices = [v for v in voices if v.language.lower().startswith(prefix)]
    return voices


@router.get("/model")
async def get_model(language: Optional[str] = None):
    return {"language": language, "model": select_model(language)}
