"""Sample formats and their mapping to the backend's native format codes."""

from __future__ import annotations

import enum


class AudioFormat(enum.Enum):
    """Sample format of an audio stream."""

    UNKNOWN = 0
    UNSIGNED_INT8 = 1
    SIGNED_INT16 = 2
    SIGNED_INT24 = 3
    SIGNED_INT32 = 4
    FLOAT32 = 5


class MaFormat(enum.IntEnum):
    """Format codes used by the audio backend library."""

    UNKNOWN = 0
    U8 = 1
    S16 = 2
    S24 = 3
    S32 = 4
    F32 = 5
    COUNT = 6


_FORMAT_NAMES = {
    AudioFormat.UNKNOWN: "Unknown",
    AudioFormat.UNSIGNED_INT8: "UnsignedInt8",
    AudioFormat.SIGNED_INT16: "SignedInt16",
    AudioFormat.SIGNED_INT24: "SignedInt24",
    AudioFormat.SIGNED_INT32: "SignedInt32",
    AudioFormat.FLOAT32: "Float32",
}

_MA_TO_AUDIO = {
    MaFormat.UNKNOWN: AudioFormat.UNKNOWN,
    MaFormat.U8: AudioFormat.UNSIGNED_INT8,
    MaFormat.S16: AudioFormat.SIGNED_INT16,
    MaFormat.S24: AudioFormat.SIGNED_INT24,
    MaFormat.S32: AudioFormat.SIGNED_INT32,
    MaFormat.F32: AudioFormat.FLOAT32,
}

_AUDIO_TO_MA = {audio: ma for ma, audio in _MA_TO_AUDIO.items()}


def format_to_string(audio_format: AudioFormat) -> str:
    """Return the display name of a format."""
    try:
        return _FORMAT_NAMES[audio_format]
    except (KeyError, TypeError):
        raise ValueError("Audio format unknown") from None


def to_audio_format(ma_format: MaFormat | int) -> AudioFormat:
    """Convert a backend format code into an AudioFormat."""
    try:
        return _MA_TO_AUDIO[ma_format]
    except (KeyError, TypeError):
        raise ValueError("ma_format unknown") from None


def to_ma_format(audio_format: AudioFormat) -> MaFormat:
    """Convert an AudioFormat into the backend format code."""
    try:
        return _AUDIO_TO_MA[audio_format]
    except (KeyError, TypeError):
        raise ValueError("Audio format unknown") from None