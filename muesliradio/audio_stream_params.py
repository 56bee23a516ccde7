"""Parameters describing an input, output or duplex audio stream."""

from __future__ import annotations

from dataclasses import dataclass

from .audio_device import DeviceId
from .audio_format import AudioFormat, format_to_string

MIN_SAMPLE_RATE = 44100
MIN_BUFFER_LENGTH = 32
MIN_PERIOD_SIZE = 3


class StreamParamsError(ValueError):
    """Raised when stream parameters are invalid."""


@dataclass(frozen=True)
class AudioStreamParams:
    """Settings shared by every kind of stream."""

    sample_rate: int
    audio_format: AudioFormat
    buffer_length: int
    period_size: int


@dataclass(frozen=True)
class InputAudioStreamParams(AudioStreamParams):
    """A stream that captures from an input device."""

    input_device_id: DeviceId
    number_of_input_channels: int


@dataclass(frozen=True)
class OutputAudioStreamParams(AudioStreamParams):
    """A stream that plays to an output device."""

    output_device_id: DeviceId
    number_of_output_channels: int


@dataclass(frozen=True)
class DuplexAudioStreamParams(InputAudioStreamParams, OutputAudioStreamParams):
    """A stream that captures and plays at the same time."""


def make_audio_stream_params(
    sample_rate: int,
    audio_format: AudioFormat,
    buffer_length: int,
    period_size: int,
    input_device_id: DeviceId | None = None,
    number_of_input_channels: int | None = None,
    output_device_id: DeviceId | None = None,
    number_of_output_channels: int | None = None,
) -> AudioStreamParams:
    """Validate the settings and build the matching kind of stream parameters."""
    if sample_rate < MIN_SAMPLE_RATE:
        raise StreamParamsError("Invalid sample rate")
    if audio_format is not AudioFormat.FLOAT32:
        raise StreamParamsError("Invalid format")
    if buffer_length < MIN_BUFFER_LENGTH:
        raise StreamParamsError("Invalid buffer length")
    if period_size < MIN_PERIOD_SIZE:
        raise StreamParamsError("Invalid period size")

    has_input = input_device_id is not None
    has_output = output_device_id is not None

    if has_input:
        if number_of_input_channels is None:
            raise StreamParamsError("Number of input channels not set")
        if number_of_input_channels == 0:
            raise StreamParamsError("Invalid number of input channels")

    if has_output:
        if number_of_output_channels is None:
            raise StreamParamsError("Number of output channels not set")
        if number_of_output_channels == 0:
            raise StreamParamsError("Invalid number of output channels")

    common = dict(
        sample_rate=sample_rate,
        audio_format=audio_format,
        buffer_length=buffer_length,
        period_size=period_size,
    )

    if has_input and has_output:
        return DuplexAudioStreamParams(
            **common,
            input_device_id=input_device_id,
            number_of_input_channels=number_of_input_channels,
            output_device_id=output_device_id,
            number_of_output_channels=number_of_output_channels,
        )
    if has_input:
        return InputAudioStreamParams(
            **common,
            input_device_id=input_device_id,
            number_of_input_channels=number_of_input_channels,
        )
    if has_output:
        return OutputAudioStreamParams(
            **common,
            output_device_id=output_device_id,
            number_of_output_channels=number_of_output_channels,
        )
    raise StreamParamsError("No devices provided")


def stream_params_to_string(params: AudioStreamParams) -> str:
    """Describe stream parameters in human-readable form."""
    text = (
        f"Sample rate: {params.sample_rate}\n"
        f"Format: {format_to_string(params.audio_format)}"
        f"\nBuffer length: {params.buffer_length}\n"
        f"\nPeriod size: {params.period_size}\n"
    )
    if isinstance(params, InputAudioStreamParams):
        text += f"Number of input channels: {params.number_of_input_channels}\n"
    if isinstance(params, OutputAudioStreamParams):
        text += f"Number of output channels: {params.number_of_output_channels}\n"
    return text