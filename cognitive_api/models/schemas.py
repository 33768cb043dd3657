from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None
    code: Optional[str] = None


class SummarizeRequest(BaseModel):
    text: Optional[str] = None


class SummarizeResponse(BaseModel):
    summarizedText: str


class TranslateRequest(BaseModel):
    text: Optional[str] = None
    targetLanguage: Optional[str] = Field(default=None, description="Translator language code, e.g. 'es'")


class TranslateResponse(BaseModel):
    translatedText: str
    detectedLanguage: Optional[str] = None


class TextResponse(BaseModel):
    """Recognised text (OCR and speech-to-text)."""

    text: str


class HandwritingRequest(BaseModel):
    text: Optional[str] = None


class HandwritingResponse(BaseModel):
    imageUrl: str


class TextToSpeechRequest(BaseModel):
    text: Optional[str] = None
    voice: Optional[str] = Field(default=None, description="Azure neural voice name")


class TextToSpeechResponse(BaseModel):
    audioUrl: str


class HealthResponse(BaseModel):
    status: str
    service: str
