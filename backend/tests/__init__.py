"""
Test suite for the narrative TTS service

This package contains unit tests for the provider layer and its surfaces:
- test_speechify_adapter.py: request translation, response normalization, errors
- test_model_selection.py: language-driven model selection
- test_voices.py: voice catalog normalization
- test_compat.py: legacy compatibility facade
- test_audio_utils.py: base64 decoding and audio format detection
- test_tts_router.py: HTTP endpoints
"""
