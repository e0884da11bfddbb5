from typing import Any, List, Mapping, Union

from ..models import SynthesisRequest, SynthesisResult, Voice


class VendorError(Exception):
    """Base class for failures raised by vendor adapters."""


class SynthesisError(VendorError):
    """Raised when a speech synthesis call fails for any reason."""


class VoiceCatalogError(VendorError):
    """Raised when the voice catalog cannot be retrieved."""


class TTSVendorAdapter:
    """Base class for TTS vendor adapters.

    Callers depend on this interface only, so a vendor can be swapped
    without touching call sites.
    """

    async def synthesize(self, request: Union[SynthesisRequest, Mapping[str, Any]]) -> SynthesisResult:
        raise NotImplementedError

    async def list_voices(self) -> List[Voice]:
        raise NotImplementedError
