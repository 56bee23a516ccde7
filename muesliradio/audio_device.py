"""Audio devices and the data formats they support natively."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Hashable

from .audio_format import AudioFormat, format_to_string


@dataclass(frozen=True)
class DeviceId:
    """Opaque identifier of a device, as reported by the backend."""

    value: Hashable


class AudioDeviceType(enum.Enum):
    INPUT = "Input"
    OUTPUT = "Output"


@dataclass(frozen=True)
class NativeDataFormat:
    """One data format a device can run at without conversion."""

    format: AudioFormat
    channels: int
    sample_rate: int
    flags: int


@dataclass(frozen=True)
class AudioDevice:
    device_id: DeviceId
    name: str
    is_default: bool
    device_type: AudioDeviceType
    native_data_formats: tuple[NativeDataFormat, ...] = field(default_factory=tuple)


def make_audio_device(
    device_id: DeviceId,
    name: str,
    is_default: bool,
    device_type: AudioDeviceType,
    formats: Iterable[NativeDataFormat],
) -> AudioDevice:
    """Build a device; it must have at least one native format."""
    formats = tuple(formats)
    if not formats:
        raise ValueError("No native formats found")
    return AudioDevice(device_id, name, is_default, device_type, formats)


def native_format_to_string(native_format: NativeDataFormat) -> str:
    return (
        f"Format: {format_to_string(native_format.format)}\n"
        f"Channels: {native_format.channels}\n"
        f"Sample Rate: {native_format.sample_rate}\n"
        f"Flags: {native_format.flags}\n"
    )


def device_to_string(device: AudioDevice) -> str:
    header = (
        f"Name: {device.name}\n"
        f"Default: {'true' if device.is_default else 'false'}\n"
        f"Type: {device.device_type.value}\n"
        "Formats:\n"
    )
    return header + "".join(native_format_to_string(f) for f in device.native_data_formats)