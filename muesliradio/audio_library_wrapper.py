"""Interface that every audio backend implementation provides."""

from __future__ import annotations

import abc
from collections.abc import Callable

from .audio_buffer import AudioBuffer
from .audio_device import AudioDevice
from .audio_driver import AudioDriver
from .audio_stream_params import AudioStreamParams

AudioCallback = Callable[[AudioBuffer, AudioBuffer], None]
LogCallback = Callable[[str], None]


class AudioLibraryWrapper(abc.ABC):
    """Access to an audio library: device discovery and stream control.

    Implementations report failure to query the library by raising; stream
    control methods return whether the library accepted the request.
    """

    def __init__(self, log_callback: LogCallback | None) -> None:
        self.log_callback = log_callback
        self.audio_callback: AudioCallback | None = None
        self.input_buffer: AudioBuffer | None = None
        self.output_buffer: AudioBuffer | None = None

    @abc.abstractmethod
    def probe_devices(self) -> list[AudioDevice]:
        """Return every device the library can see."""

    @abc.abstractmethod
    def audio_driver(self) -> AudioDriver:
        """Return the driver the library is running on."""

    @abc.abstractmethod
    def open_stream(self, stream_params: AudioStreamParams, audio_callback: AudioCallback) -> bool:
        """Prepare a stream; return whether it was opened."""

    @abc.abstractmethod
    def close_stream(self) -> None:
        """Release the open stream."""

    @abc.abstractmethod
    def start_stream(self) -> bool:
        """Start the open stream; return whether it started."""

    @abc.abstractmethod
    def stop_stream(self) -> bool:
        """Stop the running stream; return whether it stopped."""

    @abc.abstractmethod
    def is_stream_open(self) -> bool:
        """Whether a stream is open."""

    @abc.abstractmethod
    def is_stream_running(self) -> bool:
        """Whether the open stream is running or starting."""


def make_audio_library_wrapper(
    wrapper_class: type[AudioLibraryWrapper],
    log_callback: LogCallback | None,
    audio_driver: AudioDriver,
) -> AudioLibraryWrapper:
    """Instantiate a wrapper implementation for the given driver."""
    return wrapper_class(log_callback, audio_driver)