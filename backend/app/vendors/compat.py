from typing import Any, List, Mapping, Union

from .base import TTSVendorAdapter
from .speechify import SpeechifyAdapter
from ..models import SynthesisRequest, SynthesisResult, Voice


class LegacyCompatibleTTSProvider(TTSVendorAdapter):
    """Backward compatible wrapper for call sites written against ElevenLabs.

    Legacy voice settings (stability, similarity_boost, ...) are accepted on the
    request and dropped by the underlying adapter.
    """

    def __init__(self, api_key: str, **adapter_options: Any):
        self._adapter = SpeechifyAdapter(api_key, **adapter_options)

    async def synthesize(self, request: Union[SynthesisRequest, Mapping[str, Any]]) -> SynthesisResult:
        return await self._adapter.synthesize(request)

    async def list_voices(self) -> List[Voice]:
        return await self._adapter.list_voices()
