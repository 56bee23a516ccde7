import pytest

from muesliradio.audio_buffer import AudioBuffer, make_audio_buffer


def _buffer(samples, channels, length):
    buffer = make_audio_buffer(channels, length)
    buffer.copy_from_raw_buffer(samples, channels, length, False)
    return buffer


def _contents(buffer, channels, length):
    out = [None] * (channels * length)
    buffer.write_to_raw_buffer(out, channels, length, False)
    return out


def test_make_audio_buffer():
    buffer = make_audio_buffer(2, 5)
    assert buffer.number_of_channels == 2
    assert buffer.buffer_length == 5

    another = make_audio_buffer(3, 1)
    assert another.number_of_channels == 3
    assert another.buffer_length == 1


def test_empty_buffer_has_no_length():
    assert make_audio_buffer(0, 8).buffer_length == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        AudioBuffer(-1, 4)


def test_clear():
    buffer = _buffer([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, 3)

    buffer.clear(3)
    assert _contents(buffer, 3, 3) == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    buffer.clear(1)
    assert _contents(buffer, 3, 3) == [1, 2, 3, 0, 0, 0, 7, 8, 9]

    buffer.clear(0)
    assert _contents(buffer, 3, 3) == [0, 0, 0, 0, 0, 0, 7, 8, 9]

    buffer.clear(2)
    assert _contents(buffer, 3, 3) == [0] * 9

    buffer.copy_from_raw_buffer([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, 3, False)
    buffer.clear()
    assert _contents(buffer, 3, 3) == [0] * 9


def test_add_from():
    dest = _buffer([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, 3)
    src = _buffer([11, 22, 33, 44], 2, 2)

    dest.add_from(src, 2, 0)
    assert _contents(dest, 3, 3) == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    dest.add_from(src, 0, 3)
    assert _contents(dest, 3, 3) == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    dest.add_from(src, 1, 2)
    assert _contents(dest, 3, 3) == [1, 2, 3, 4, 5, 6, 40, 52, 9]

    dest.add_from(src, 0, 0)
    assert _contents(dest, 3, 3) == [12, 24, 3, 4, 5, 6, 40, 52, 9]

    src.add_from(dest, 1, 1)
    assert _contents(src, 2, 2) == [11, 22, 37, 49]


def test_copy_from():
    dest = _buffer([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, 3)
    src = _buffer([11, 22, 33, 44], 2, 2)

    dest.copy_from(src, 2, 0)
    assert _contents(dest, 3, 3) == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    dest.copy_from(src, 0, 3)
    assert _contents(dest, 3, 3) == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    dest.copy_from(src, 1, 2)
    assert _contents(dest, 3, 3) == [1, 2, 3, 4, 5, 6, 33, 44, 9]

    dest.copy_from(src, 0, 0)
    assert _contents(dest, 3, 3) == [11, 22, 3, 4, 5, 6, 33, 44, 9]

    src.copy_from(dest, 1, 1)
    assert _contents(src, 2, 2) == [11, 22, 4, 5]


def test_assign():
    dest = _buffer([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, 3)
    src = _buffer([11, 22, 33, 44], 2, 2)

    assert dest.assign(src) is dest
    assert _contents(dest, 3, 3) == [11, 22, 3, 33, 44, 6, 7, 8, 9]

    dest2 = _buffer([100, 200, 300, 400, 500, 600, 700, 800, 900, 1000, 1100, 1200], 4, 3)

    src.assign(dest2)
    assert _contents(src, 2, 2) == [100, 200, 400, 500]

    dest2.assign(dest)
    assert _contents(dest2, 4, 3) == [11, 22, 3, 33, 44, 6, 7, 8, 9, 1000, 1100, 1200]


def test_in_place_addition():
    dest = _buffer([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, 3)
    src = _buffer([11, 22, 33, 44], 2, 2)

    dest += dest
    assert _contents(dest, 3, 3) == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    dest += src
    assert _contents(dest, 3, 3) == [12, 24, 3, 37, 49, 6, 7, 8, 9]

    dest2 = _buffer([100, 200, 300, 400, 500, 600, 700, 800, 900, 1000, 1100, 1200], 4, 3)

    src += dest2
    assert _contents(src, 2, 2) == [111, 222, 433, 544]

    dest2 += dest
    assert _contents(dest2, 4, 3) == [112, 224, 303, 437, 549, 606, 707, 808, 909, 1000, 1100, 1200]


def test_plain_addition_not_supported():
    with pytest.raises(TypeError):
        make_audio_buffer(1, 1) + make_audio_buffer(1, 1)


def test_deinterleave():
    samples = [1, 2, 3, 4, 5, 6] * 4
    buffer = make_audio_buffer(6, 4)
    buffer.copy_from_raw_buffer(samples, 6, 4, True)
    buffer.write_to_raw_buffer(samples, 6, 4, False)
    assert samples == [1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 6, 6, 6, 6]

    samples2 = [1, 2, 3] * 5
    buffer2 = make_audio_buffer(3, 5)
    buffer2.copy_from_raw_buffer(samples2, 3, 5, True)
    buffer2.write_to_raw_buffer(samples2, 3, 5, False)
    assert samples2 == [1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3]


def test_interleave():
    samples = [1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 6, 6, 6, 6]
    buffer = make_audio_buffer(6, 4)
    buffer.copy_from_raw_buffer(samples, 6, 4, False)
    buffer.write_to_raw_buffer(samples, 6, 4, True)
    assert samples == [1, 2, 3, 4, 5, 6] * 4

    samples2 = [1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3]
    buffer2 = make_audio_buffer(3, 5)
    buffer2.copy_from_raw_buffer(samples2, 3, 5, False)
    buffer2.write_to_raw_buffer(samples2, 3, 5, True)
    assert samples2 == [1, 2, 3] * 5


def test_incompatible_raw_buffer_is_ignored():
    buffer = _buffer([1, 2, 3, 4], 2, 2)
    buffer.copy_from_raw_buffer([9, 9, 9, 9, 9, 9], 3, 2)
    assert _contents(buffer, 2, 2) == [1, 2, 3, 4]


def test_channel_returns_copy():
    buffer = _buffer([1, 2, 3, 4], 2, 2)
    samples = buffer.channel(1)
    samples[0] = 99
    assert buffer.channel(1) == [3, 4]
    with pytest.raises(IndexError):
        buffer.channel(2)