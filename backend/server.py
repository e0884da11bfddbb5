"""
Narrative TTS service - Speechify provider backend

This module bootstraps a FastAPI application:
- Configuration and environment setup
- CORS middleware
- TTS router inclusion
- Uvicorn server startup

The business logic is organized into:
- app/config.py: Environment variables and configuration
- app/models.py: Pydantic models (requests, results, voices)
- app/utils.py: Audio helpers (base64 decoding, format sniffing, MIME types)
- app/vendors/: Vendor adapters (Speechify) and the legacy compatibility facade
- app/routers/: API route handlers
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import CORS_ORIGINS
from app.routers import tts

# Initialize FastAPI app
app = FastAPI(title="Narrative TTS Service", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if CORS_ORIGINS == "*" else CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tts.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("server:app", host="0.0.0.0", port=8001, reload=True)
