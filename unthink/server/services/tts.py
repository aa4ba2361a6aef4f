"""
Text-to-Speech Service.

Turns text into an MP3 with the hosted ``text-to-speech`` function and keeps
the result in the ``audio`` bucket so it can be attached to an episode.
"""

from __future__ import annotations

import base64
import binascii
import time
from typing import List

from unthink.content.durations import estimate_speech_seconds, format_duration
from unthink.core.errors import ExternalServiceError
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import VOICE_DESCRIPTIONS, MediaBucket, Voice
from unthink.core.models.io import SpeechRequest, SpeechResult, VoiceRead
from unthink.integrations import FunctionsClient, StorageClient

logger = get_logger(__name__)


def list_voices() -> List[VoiceRead]:
    return [
        VoiceRead(id=voice, name=voice.value.capitalize(), description=VOICE_DESCRIPTIONS[voice])
        for voice in Voice
    ]


class SpeechService:
    def __init__(self, functions: FunctionsClient, storage: StorageClient, function_name: str) -> None:
        self.functions = functions
        self.storage = storage
        self.function_name = function_name

    async def generate(self, payload: SpeechRequest) -> SpeechResult:
        """
        Generate speech for ``payload.text`` and store it.

        Raises:
            ExternalServiceError: if the function fails, returns no audio, or
                the upload is rejected
        """
        response = await self.functions.invoke(
            self.function_name, {"text": payload.text, "voice": payload.voice.value}
        )
        encoded = response.get("audioContent")
        if not encoded:
            raise ExternalServiceError("No audio content received", details=response)
        try:
            audio = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ExternalServiceError("Audio content is not valid base64") from e

        path = f"generated-audio-{int(time.time() * 1000)}.mp3"
        bucket = MediaBucket.audio.value
        await self.storage.upload(bucket, path, audio, content_type="audio/mpeg")

        seconds = estimate_speech_seconds(payload.text)
        logger.info(f"Speech generated: voice={payload.voice.value} bytes={len(audio)} est={seconds}s")
        return SpeechResult(
            url=self.storage.public_url(bucket, path),
            voice=payload.voice,
            estimated_duration=seconds,
            formatted_duration=format_duration(seconds),
        )
