"""Audio engine: device lookup and stream management over a library wrapper."""

from __future__ import annotations

from .audio_buffer import AudioBuffer
from .audio_device import AudioDevice, AudioDeviceType
from .audio_driver import AudioDriver, available_audio_drivers
from .audio_format import AudioFormat
from .audio_library_wrapper import (
    AudioLibraryWrapper,
    LogCallback,
    make_audio_library_wrapper,
)
from .audio_stream_params import AudioStreamParams, StreamParamsError, make_audio_stream_params


class AudioEngineError(Exception):
    """Raised when the engine cannot carry out a request."""


def _pass_through(input_buffer: AudioBuffer, output_buffer: AudioBuffer) -> None:
    output_buffer.assign(input_buffer)


class AudioEngine:
    """Finds devices and runs a stream that copies input to output."""

    SAMPLE_RATE = 48000
    FORMAT = AudioFormat.FLOAT32
    PERIOD_SIZE = 3
    ALLOWED_BUFFER_LENGTHS = (1024, 2048, 4096, 8192, 16384)

    def __init__(
        self,
        wrapper_class: type[AudioLibraryWrapper],
        log_callback: LogCallback | None,
        audio_driver: AudioDriver | None = None,
    ) -> None:
        self._wrapper_class = wrapper_class
        self._log_callback = log_callback
        self._audio_callback = _pass_through
        self.library_wrapper: AudioLibraryWrapper | None = None
        self.audio_devices: list[AudioDevice] = []
        self.stream_params: AudioStreamParams | None = None

        if audio_driver is None:
            audio_driver = available_audio_drivers()[0]
        try:
            self.set_audio_driver(audio_driver)
        except AudioEngineError as error:
            raise AudioEngineError(f"Error setting audio driver: {error}") from error

    def set_audio_driver(self, audio_driver: AudioDriver) -> None:
        """Replace the library wrapper with one running on another driver."""
        try:
            wrapper = make_audio_library_wrapper(self._wrapper_class, self._log_callback, audio_driver)
        except Exception as error:
            raise AudioEngineError(str(error)) from error
        self.library_wrapper = wrapper

    def current_audio_driver(self) -> AudioDriver:
        return self.library_wrapper.audio_driver()

    def probe_devices(self) -> None:
        """Refresh the list of known devices."""
        try:
            devices = self.library_wrapper.probe_devices()
        except Exception as error:
            raise AudioEngineError(f"Could not probe devices: {error}\n") from error
        self.audio_devices = list(devices)

    def default_input_device_name(self) -> str:
        return self._default_audio_device(AudioDeviceType.INPUT).name

    def default_output_device_name(self) -> str:
        return self._default_audio_device(AudioDeviceType.OUTPUT).name

    def start_stream(
        self,
        input_device_name: str | None,
        output_device_name: str | None,
        buffer_length: int,
    ) -> None:
        """Stop any running stream and start one on the named devices."""
        if not self.is_buffer_length_allowed(buffer_length):
            raise AudioEngineError(f"Buffer length {buffer_length} is not allowed")

        input_id = input_channels = None
        if input_device_name is not None:
            try:
                device = self.get_audio_device(input_device_name, AudioDeviceType.INPUT)
            except AudioEngineError as error:
                raise AudioEngineError(
                    f"Could not find input device {input_device_name}: {error}"
                ) from error
            input_id = device.device_id
            input_channels = device.native_data_formats[0].channels

        output_id = output_channels = None
        if output_device_name is not None:
            try:
                device = self.get_audio_device(output_device_name, AudioDeviceType.OUTPUT)
            except AudioEngineError as error:
                raise AudioEngineError(
                    f"Could not find output device {output_device_name}: {error}"
                ) from error
            output_id = device.device_id
            output_channels = device.native_data_formats[0].channels

        try:
            params = make_audio_stream_params(
                self.SAMPLE_RATE,
                self.FORMAT,
                buffer_length,
                self.PERIOD_SIZE,
                input_id,
                input_channels,
                output_id,
                output_channels,
            )
        except StreamParamsError as error:
            raise AudioEngineError(f"Error creating stream params: {error}") from error

        if not self.close_stream():
            raise AudioEngineError("Could not close running stream")

        self.stream_params = params

        if not self.open_stream():
            raise AudioEngineError("Could not open stream")

    def get_audio_device(self, device_name: str, device_type: AudioDeviceType) -> AudioDevice:
        """Return the first device with this name; it must be of the given type."""
        device = next((d for d in self.audio_devices if d.name == device_name), None)
        if device is None:
            raise AudioEngineError("Audio device not found")
        if device.device_type is not device_type:
            raise AudioEngineError("Audio device is not of type provided")
        return device

    @staticmethod
    def is_buffer_length_allowed(buffer_length: int) -> bool:
        return buffer_length in AudioEngine.ALLOWED_BUFFER_LENGTHS

    def open_stream(self) -> bool:
        """Open and start a stream with the current parameters."""
        return (
            self.library_wrapper.open_stream(self.stream_params, self._audio_callback)
            and self.library_wrapper.start_stream()
        )

    def close_stream(self) -> bool:
        """Stop and close the current stream, if any; False if it would not stop."""
        wrapper = self.library_wrapper
        if not wrapper.is_stream_open():
            return True
        if wrapper.is_stream_running() and not wrapper.stop_stream():
            return False
        wrapper.close_stream()
        return True

    def _default_audio_device(self, device_type: AudioDeviceType) -> AudioDevice:
        for device in self.audio_devices:
            if device.device_type is device_type and device.is_default:
                return device
        raise AudioEngineError("Audio device not found")


def make_audio_engine(
    wrapper_class: type[AudioLibraryWrapper],
    log_callback: LogCallback | None,
    audio_driver: AudioDriver | None = None,
) -> AudioEngine:
    return AudioEngine(wrapper_class, log_callback, audio_driver)