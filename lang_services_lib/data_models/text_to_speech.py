"""
Data models for the Text to Speech service.
"""

from enum import Enum
from typing import Optional

from lang_services_lib.data_models.base_model import BaseServiceModel
from lang_services_lib.data_models.constants import HttpMediaType


class AudioFormat(str, Enum):
    """Audio formats the service can synthesize; the value is the media type."""

    OGG = HttpMediaType.AUDIO_OGG
    WAV = HttpMediaType.AUDIO_WAV
    FLAC = HttpMediaType.AUDIO_FLAC

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "AudioFormat":
        """Look up a format by its case-insensitive name, e.g. ``"wav"``."""
        return cls[name.strip().upper()]


class Voice(BaseServiceModel):
    name: str
    language: Optional[str] = None
    gender: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
