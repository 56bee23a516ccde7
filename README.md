# muesliradio

A small audio engine core written in pure Python with no third-party
dependencies. It models sample formats, audio drivers, audio devices,
multi-channel sample buffers and stream parameters. It also provides an
`AudioEngine` that looks up devices by name and takes a backend through a
stream's stop, close, open and start steps.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `muesliradio.audio_format`

- `AudioFormat`: `UNKNOWN`, `UNSIGNED_INT8`, `SIGNED_INT16`, `SIGNED_INT24`,
  `SIGNED_INT32`, `FLOAT32`.
- `MaFormat`: the backend's integer format codes (`UNKNOWN`, `U8`, `S16`,
  `S24`, `S32`, `F32`, `COUNT`).
- `format_to_string(audio_format)` returns a display name such as
  `"Float32"`.
- `to_audio_format(ma_format)` and `to_ma_format(audio_format)` convert
  between the two enums.

Each of these functions raises `ValueError` for a value it does not know.
For example, `to_audio_format(MaFormat.COUNT)` raises
`ValueError("ma_format unknown")`.

### `muesliradio.audio_driver`

- `AudioDriver`: `WASAPI`, `DIRECT_SOUND`, `WINMM`, `CORE_AUDIO`,
  `PULSE_AUDIO`, `ALSA`, `JACK`, `NULL`.
- `Backend`: the backend's integer codes.
- `available_audio_drivers(platform=None)` returns the drivers for a
  platform string, in order of preference, always ending with
  `AudioDriver.NULL`. When no platform is given it uses `sys.platform`.
  - Windows: WASAPI, DirectSound, WinMM.
  - macOS: Core Audio.
  - Linux: PulseAudio, ALSA, JACK.
- `driver_to_string(driver)` and `driver_from_string(name)` use the
  backend display names, such as `"PulseAudio"`, `"ALSA"`, `"Core Audio"`
  and `"Null"`.
- `to_backend(driver)` and `to_audio_driver(backend)` convert between the
  two enums.

Unknown values raise `ValueError` with the message `"Audio driver unknown"`
or `"Audio backend unknown"`.

### `muesliradio.audio_device`

These are frozen dataclasses and an enum:

- `DeviceId(value)`
- `AudioDeviceType.INPUT` and `AudioDeviceType.OUTPUT`
- `NativeDataFormat(format, channels, sample_rate, flags)`
- `AudioDevice(device_id, name, is_default, device_type, native_data_formats)`

`make_audio_device(device_id, name, is_default, device_type, formats)`
builds a device. It raises `ValueError("No native formats found")` when
`formats` is empty.

`device_to_string(device)` and `native_format_to_string(native_format)`
return multi-line descriptions of a device and of one of its formats.

### `muesliradio.audio_buffer`

`AudioBuffer(number_of_channels, samples_per_channel)` is a set of
equal-length channels, all set to zero at the start. It is also available as
`make_audio_buffer(...)`.

- `number_of_channels` and `buffer_length` are properties.
- `channel(index)` returns a copy of one channel's samples. It raises
  `IndexError` when the index is out of range.
- `copy_from(source, channel_src, channel_dest)` and
  `add_from(source, channel_src, channel_dest)` copy or add one channel
  into another. They work over the length of the shorter channel.
- `clear(channel=None)` zeroes one channel, or every channel when no
  channel is given.
- `copy_from_raw_buffer(samples, number_of_channels, samples_per_channel, deinterleave=True)`
  fills the buffer from a flat sequence.
- `write_to_raw_buffer(destination, number_of_channels, samples_per_channel, interleave=True)`
  writes the buffer into a flat mutable sequence.
- `assign(other)` copies every channel the two buffers share.
- `buffer += other` adds every channel the two buffers share.

Some cases leave the buffer unchanged instead of raising:

- naming a channel that does not exist;
- passing `None` as the raw buffer;
- giving a channel count or length that does not match the buffer's shape.

If a raw sequence is shorter than the given shape, the method raises
`ValueError`.

```python
from muesliradio.audio_buffer import make_audio_buffer

buffer = make_audio_buffer(2, 3)
buffer.copy_from_raw_buffer([1, 10, 2, 20, 3, 30], 2, 3, True)   # interleaved in
out = [0] * 6
buffer.write_to_raw_buffer(out, 2, 3, False)                     # planar out
# out == [1, 2, 3, 10, 20, 30]
```

### `muesliradio.audio_stream_params`

`make_audio_stream_params(sample_rate, audio_format, buffer_length, period_size, input_device_id=None, number_of_input_channels=None, output_device_id=None, number_of_output_channels=None)`
checks its arguments and returns one of these frozen dataclasses:

- `InputAudioStreamParams`
- `OutputAudioStreamParams`
- `DuplexAudioStreamParams`, a subclass of both of the above

The checks are:

- the sample rate must be at least 44100;
- the format must be `AudioFormat.FLOAT32`;
- the buffer length must be at least 32;
- the period size must be at least 3;
- each device given needs a channel count other than zero;
- at least one device must be given.

A failed check raises `StreamParamsError`, a subclass of `ValueError`, with
messages such as `"Invalid sample rate"` or `"No devices provided"`.

`stream_params_to_string(params)` describes a set of parameters.

### `muesliradio.audio_library_wrapper`

`AudioLibraryWrapper` is the abstract backend interface. Its constructor
takes a log callback. Subclasses implement these methods:

- `probe_devices()`
- `audio_driver()`
- `open_stream(stream_params, audio_callback)`
- `close_stream()`
- `start_stream()`
- `stop_stream()`
- `is_stream_open()`
- `is_stream_running()`

The methods that control a stream return `True` or `False` to report
whether it worked.

`make_audio_library_wrapper(wrapper_class, log_callback, audio_driver)`
creates an instance with `wrapper_class(log_callback, audio_driver)`.

### `muesliradio.audio_engine`

`AudioEngine(wrapper_class, log_callback, audio_driver=None)`, also
available as `make_audio_engine(...)`, creates a wrapper for the driver.
When no driver is given it uses the first entry of
`available_audio_drivers()`.

- `probe_devices()` refreshes `audio_devices`.
- `default_input_device_name()` and `default_output_device_name()` return
  the names of the default devices.
- `get_audio_device(name, device_type)` finds a device by name.
- `start_stream(input_device_name, output_device_name, buffer_length)`
  does the following, in order:
  1. checks the buffer length;
  2. looks up the devices;
  3. builds the parameters: 48000 Hz, `FLOAT32`, period size 3, and the
     channel count of each device's first native format;
  4. stops and closes any open stream;
  5. opens and starts a new stream.

  Either device name may be `None`.
- `open_stream()` and `close_stream()` return `True` or `False`.
- `is_buffer_length_allowed(n)` checks `n` against `ALLOWED_BUFFER_LENGTHS`,
  which is `(1024, 2048, 4096, 8192, 16384)`.
- `set_audio_driver(driver)` replaces the wrapper.
- `current_audio_driver()` asks the wrapper which driver it runs on.

The stream's audio callback copies the input buffer into the output buffer.

Failures raise `AudioEngineError` with messages such as
`"Buffer length 1234 is not allowed"` or
`"Could not find input device mic: Audio device not found"`.

The example below uses a small wrapper that records what the engine asks of
it:

```python
from muesliradio.audio_device import (
    AudioDeviceType, DeviceId, NativeDataFormat, make_audio_device,
)
from muesliradio.audio_driver import AudioDriver
from muesliradio.audio_engine import make_audio_engine
from muesliradio.audio_format import AudioFormat
from muesliradio.audio_library_wrapper import AudioLibraryWrapper

FMT = [NativeDataFormat(AudioFormat.FLOAT32, 2, 48000, 0)]


class MyWrapper(AudioLibraryWrapper):
    def __init__(self, log_callback, audio_driver):
        super().__init__(log_callback)
        self.driver = audio_driver
        self.state = "closed"

    def probe_devices(self):
        return [
            make_audio_device(DeviceId(1), "mic", True, AudioDeviceType.INPUT, FMT),
            make_audio_device(DeviceId(2), "speakers", True, AudioDeviceType.OUTPUT, FMT),
        ]

    def audio_driver(self):
        return self.driver

    def open_stream(self, stream_params, audio_callback):
        self.state = "open"
        return True

    def close_stream(self):
        self.state = "closed"

    def start_stream(self):
        self.state = "running"
        return True

    def stop_stream(self):
        self.state = "open"
        return True

    def is_stream_open(self):
        return self.state != "closed"

    def is_stream_running(self):
        return self.state == "running"


engine = make_audio_engine(MyWrapper, print, AudioDriver.NULL)
engine.probe_devices()
engine.start_stream(
    engine.default_input_device_name(),
    engine.default_output_device_name(),
    2048,
)
```

## What this package does not do

- It comes with no `AudioLibraryWrapper` that talks to a real audio
  library, so it does not record or play sound by itself.
- It does not fill or drain audio buffers from a device thread. A backend
  you write would do that.
- It installs no command-line program.