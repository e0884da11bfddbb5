from .base import TTSVendorAdapter, VendorError, SynthesisError, VoiceCatalogError
from .speechify import SpeechifyAdapter, select_model, ENGLISH_MODEL, MULTILINGUAL_MODEL
from .compat import LegacyCompatibleTTSProvider
from ..config import SPEECHIFY_API_KEY, SPEECHIFY_VOICE_ID


legacy_tts_provider = LegacyCompatibleTTSProvider(SPEECHIFY_API_KEY, default_voice=SPEECHIFY_VOICE_ID)
