import pytest

from pngstash.exceptions import UnpackException
from pngstash.streams import Stream


def test_bytes_stream_read():
    stream = Stream(b'\x01\x02\x03\x04\x05')

    assert stream.length == 5
    assert stream.read(1) == b'\x01'
    assert stream.read(2) == b'\x02\x03'
    assert stream.remaining == 2
    assert not stream.is_exhausted()
    assert stream.read_all() == b'\x04\x05'
    assert stream.tell() == 5
    assert stream.is_exhausted()


def test_bytes_stream_read_past_end():
    """A short read is an error and the stream doesn't move"""
    stream = Stream(b'\x01\x02\x03')

    with pytest.raises(UnpackException):
        stream.read(4)

    assert stream.tell() == 0
    assert stream.read(3) == b'\x01\x02\x03'
    assert stream.read(0) == b''


def test_file_stream_read(tmp_path):
    path = tmp_path / 'data'
    path.write_bytes(b'\x01\x02\x03\x04\x05')

    with Stream(str(path)) as stream:
        assert stream.read(1) == b'\x01'
        stream.seek(3)
        assert stream.read_all() == b'\x04\x05'


def test_stream_wrong_kind():
    with pytest.raises(ValueError):
        Stream(1234)
