"""
Media upload and text-to-speech I/O models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from unthink.core.models.domain import Voice

MAX_SPEECH_CHARACTERS = 4000


class MediaUploadResult(BaseModel):
    url: str = Field(description="Public URL of the stored object")
    path: str = Field(description="Object path inside the bucket")
    bucket: str
    content_type: str
    size: int = Field(description="Size in bytes")
    formatted_size: str


class SpeechRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(min_length=1, max_length=MAX_SPEECH_CHARACTERS)
    voice: Voice = Voice.alloy


class SpeechResult(BaseModel):
    url: str
    voice: Voice
    estimated_duration: int = Field(description="Estimated length in seconds")
    formatted_duration: str


class VoiceRead(BaseModel):
    id: Voice
    name: str
    description: str
