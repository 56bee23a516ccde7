"""Audio drivers and their mapping to backend identifiers."""

from __future__ import annotations

import enum
import sys


class AudioDriver(enum.Enum):
    """Audio driver that a stream can run on."""

    WASAPI = "wasapi"
    DIRECT_SOUND = "dsound"
    WINMM = "winmm"
    CORE_AUDIO = "coreaudio"
    PULSE_AUDIO = "pulseaudio"
    ALSA = "alsa"
    JACK = "jack"
    NULL = "null"


class Backend(enum.IntEnum):
    """Backend codes of the audio library."""

    WASAPI = 0
    DSOUND = 1
    WINMM = 2
    COREAUDIO = 3
    SNDIO = 4
    AUDIO4 = 5
    OSS = 6
    PULSEAUDIO = 7
    ALSA = 8
    JACK = 9
    AAUDIO = 10
    OPENSL = 11
    WEBAUDIO = 12
    CUSTOM = 13
    NULL = 14


_BACKEND_NAMES = {
    Backend.WASAPI: "WASAPI",
    Backend.DSOUND: "DirectSound",
    Backend.WINMM: "WinMM",
    Backend.COREAUDIO: "Core Audio",
    Backend.SNDIO: "sndio",
    Backend.AUDIO4: "audio(4)",
    Backend.OSS: "OSS",
    Backend.PULSEAUDIO: "PulseAudio",
    Backend.ALSA: "ALSA",
    Backend.JACK: "JACK",
    Backend.AAUDIO: "AAudio",
    Backend.OPENSL: "OpenSL|ES",
    Backend.WEBAUDIO: "Web Audio",
    Backend.CUSTOM: "Custom",
    Backend.NULL: "Null",
}

_DRIVER_TO_BACKEND = {
    AudioDriver.WASAPI: Backend.WASAPI,
    AudioDriver.DIRECT_SOUND: Backend.DSOUND,
    AudioDriver.WINMM: Backend.WINMM,
    AudioDriver.CORE_AUDIO: Backend.COREAUDIO,
    AudioDriver.PULSE_AUDIO: Backend.PULSEAUDIO,
    AudioDriver.ALSA: Backend.ALSA,
    AudioDriver.JACK: Backend.JACK,
    AudioDriver.NULL: Backend.NULL,
}

_BACKEND_TO_DRIVER = {backend: driver for driver, backend in _DRIVER_TO_BACKEND.items()}


def available_audio_drivers(platform: str | None = None) -> tuple[AudioDriver, ...]:
    """Drivers usable on a platform (the running one by default), preferred first."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        native = (AudioDriver.WASAPI, AudioDriver.DIRECT_SOUND, AudioDriver.WINMM)
    elif platform == "darwin":
        native = (AudioDriver.CORE_AUDIO,)
    elif platform.startswith("linux"):
        native = (AudioDriver.PULSE_AUDIO, AudioDriver.ALSA, AudioDriver.JACK)
    else:
        native = ()
    return (*native, AudioDriver.NULL)


def to_backend(driver: AudioDriver) -> Backend:
    """Return the backend code for a driver."""
    try:
        return _DRIVER_TO_BACKEND[driver]
    except (KeyError, TypeError):
        raise ValueError("Audio driver unknown") from None


def to_audio_driver(backend: Backend | int) -> AudioDriver:
    """Return the driver for a backend code."""
    try:
        return _BACKEND_TO_DRIVER[backend]
    except (KeyError, TypeError):
        raise ValueError("Audio backend unknown") from None


def driver_to_string(driver: AudioDriver) -> str:
    """Return the backend's display name for a driver."""
    return _BACKEND_NAMES[to_backend(driver)]


def driver_from_string(name: str) -> AudioDriver:
    """Return the driver whose backend has the given display name."""
    for backend, backend_name in _BACKEND_NAMES.items():
        if backend_name == name:
            return to_audio_driver(backend)
    raise ValueError("Audio backend unknown")