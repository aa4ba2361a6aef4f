"""
Text-to-Speech Endpoints.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter

from unthink.core.models.io import SpeechRequest, SpeechResult, VoiceRead
from unthink.server.services.deps import CurrentUser, SpeechServiceDep
from unthink.server.services.tts import list_voices

router = APIRouter()


@router.get(
    "/voices",
    response_model=List[VoiceRead],
    summary="List Voices",
    description="Voices available for speech generation.",
)
async def get_voices():
    return list_voices()


@router.post(
    "",
    response_model=SpeechResult,
    summary="Generate Speech",
    description="Turn text into an MP3 stored in the audio bucket.",
    response_description="The URL of the generated audio and its estimated length.",
    responses={502: {"description": "Speech generation or upload failed"}},
)
async def generate_speech(payload: SpeechRequest, user: CurrentUser, service: SpeechServiceDep):
    """
    Generate speech.

    - **text**: 1 to 4000 characters after trimming.
    - **voice**: ``alloy``, ``echo``, ``fable``, ``onyx``, ``nova`` or ``shimmer``.

    The duration is estimated at 150 words per minute.
    """
    return await service.generate(payload)
