"""Multi-channel, non-interleaved sample buffer."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


class AudioBuffer:
    """A fixed number of channels, each holding the same number of samples.

    Operations that name a channel the buffer does not have leave it unchanged.
    """

    def __init__(self, number_of_channels: int, samples_per_channel: int) -> None:
        if number_of_channels < 0 or samples_per_channel < 0:
            raise ValueError("Channel count and buffer length must not be negative")
        self._channels = [[0] * samples_per_channel for _ in range(number_of_channels)]

    @property
    def number_of_channels(self) -> int:
        return len(self._channels)

    @property
    def buffer_length(self) -> int:
        return len(self._channels[0]) if self._channels else 0

    def channel(self, index: int) -> list:
        """Return a copy of the samples of one channel."""
        if not self._is_channel_allowed(index):
            raise IndexError(f"Channel {index} out of range")
        return list(self._channels[index])

    def add_from(self, source: AudioBuffer, channel_src: int, channel_dest: int) -> None:
        """Add a source channel sample by sample into a channel of this buffer."""
        if not source._is_channel_allowed(channel_src) or not self._is_channel_allowed(channel_dest):
            return
        src = source._channels[channel_src]
        dest = self._channels[channel_dest]
        length = min(len(src), len(dest))
        dest[:length] = [d + s for d, s in zip(dest[:length], src[:length])]

    def copy_from(self, source: AudioBuffer, channel_src: int, channel_dest: int) -> None:
        """Copy a source channel over a channel of this buffer."""
        if not source._is_channel_allowed(channel_src) or not self._is_channel_allowed(channel_dest):
            return
        src = source._channels[channel_src]
        dest = self._channels[channel_dest]
        length = min(len(src), len(dest))
        dest[:length] = src[:length]

    def clear(self, channel: int | None = None) -> None:
        """Zero one channel, or every channel when none is given."""
        if channel is None:
            for samples in self._channels:
                samples[:] = [0] * len(samples)
        elif self._is_channel_allowed(channel):
            samples = self._channels[channel]
            samples[:] = [0] * len(samples)

    def copy_from_raw_buffer(
        self,
        samples: Sequence | None,
        number_of_channels: int,
        samples_per_channel: int,
        deinterleave: bool = True,
    ) -> None:
        """Fill the buffer from a flat sequence, interleaved unless told otherwise."""
        if samples is None or not self._is_raw_buffer_compatible(number_of_channels, samples_per_channel):
            return
        total = number_of_channels * samples_per_channel
        if len(samples) < total:
            raise ValueError("Raw buffer too short")
        for index, channel in enumerate(self._channels):
            if deinterleave:
                channel[:] = samples[index:total:number_of_channels]
            else:
                start = index * samples_per_channel
                channel[:] = samples[start:start + samples_per_channel]

    def write_to_raw_buffer(
        self,
        destination: MutableSequence | None,
        number_of_channels: int,
        samples_per_channel: int,
        interleave: bool = True,
    ) -> None:
        """Write the buffer into a flat mutable sequence, interleaved unless told otherwise."""
        if destination is None or not self._is_raw_buffer_compatible(number_of_channels, samples_per_channel):
            return
        total = number_of_channels * samples_per_channel
        if len(destination) < total:
            raise ValueError("Raw buffer too short")
        for index, channel in enumerate(self._channels):
            if interleave:
                destination[index:total:number_of_channels] = channel
            else:
                start = index * samples_per_channel
                destination[start:start + samples_per_channel] = channel

    def assign(self, other: AudioBuffer) -> AudioBuffer:
        """Copy every channel the two buffers share from another buffer."""
        if other is not self:
            for index in range(self.number_of_channels):
                self.copy_from(other, index, index)
        return self

    def __iadd__(self, other: AudioBuffer) -> AudioBuffer:
        if other is not self:
            for index in range(self.number_of_channels):
                self.add_from(other, index, index)
        return self

    def _is_channel_allowed(self, channel: int) -> bool:
        return 0 <= channel < len(self._channels)

    def _is_raw_buffer_compatible(self, number_of_channels: int, samples_per_channel: int) -> bool:
        return (
            bool(self._channels)
            and number_of_channels == len(self._channels)
            and samples_per_channel == len(self._channels[0])
        )


def make_audio_buffer(number_of_channels: int, samples_per_channel: int) -> AudioBuffer:
    return AudioBuffer(number_of_channels, samples_per_channel)