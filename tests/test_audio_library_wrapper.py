import pytest

from muesliradio.audio_driver import AudioDriver
from muesliradio.audio_library_wrapper import AudioLibraryWrapper, make_audio_library_wrapper


class RecordingWrapper(AudioLibraryWrapper):
    def __init__(self, log_callback, audio_driver):
        super().__init__(log_callback)
        self.driver = audio_driver
        self.open = False
        self.running = False

    def probe_devices(self):
        return []

    def audio_driver(self):
        return self.driver

    def open_stream(self, stream_params, audio_callback):
        self.audio_callback = audio_callback
        self.open = True
        return True

    def close_stream(self):
        self.open = False

    def start_stream(self):
        self.running = True
        return True

    def stop_stream(self):
        self.running = False
        return True

    def is_stream_open(self):
        return self.open

    def is_stream_running(self):
        return self.running


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AudioLibraryWrapper(None)


def test_incomplete_implementation_cannot_be_instantiated():
    class Partial(AudioLibraryWrapper):
        def __init__(self, log_callback, audio_driver):
            super().__init__(log_callback)

        def probe_devices(self):
            return []

    with pytest.raises(TypeError):
        make_audio_library_wrapper(Partial, None, AudioDriver.NULL)


def test_make_audio_library_wrapper_builds_given_class():
    logs = []
    wrapper = make_audio_library_wrapper(RecordingWrapper, logs.append, AudioDriver.NULL)

    assert isinstance(wrapper, RecordingWrapper)
    assert wrapper.audio_driver() is AudioDriver.NULL
    wrapper.log_callback("hello")
    assert logs == ["hello"]


def test_new_wrapper_has_no_callback_or_buffers():
    wrapper = make_audio_library_wrapper(RecordingWrapper, None, AudioDriver.ALSA)
    assert wrapper.audio_callback is None
    assert wrapper.input_buffer is None
    assert wrapper.output_buffer is None
    assert wrapper.log_callback is None


def test_implementation_stream_lifecycle():
    wrapper = make_audio_library_wrapper(RecordingWrapper, None, AudioDriver.NULL)

    def callback(inp, out):
        return None

    assert wrapper.open_stream(None, callback) is True
    assert wrapper.audio_callback is callback
    assert wrapper.start_stream() is True
    assert wrapper.is_stream_running() is True
    assert wrapper.stop_stream() is True
    wrapper.close_stream()
    assert wrapper.is_stream_open() is False