import struct
import zlib

import pytest

from pngstash.chunk import PNGChunk, MAX_LENGTH
from pngstash.chunk_type import ChunkType
from pngstash.exceptions import (
    CRCException,
    ChunkEncodingException,
    InvalidChunkTypeException,
    UnpackException,
)
from pngstash.streams import Stream


MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


def build_raw(length, chunk_type, data, checksum):
    return struct.pack('>I', length) + chunk_type + data + struct.pack('>I', checksum)


def test_create_chunk():
    chunk = PNGChunk.create(ChunkType.from_str('RuSt'), MESSAGE)

    assert chunk.length == 42
    assert chunk.crc == MESSAGE_CRC
    assert chunk.type == ChunkType('RuSt')
    assert chunk.data == MESSAGE
    assert chunk.size == 4 + 4 + 42 + 4


def test_create_chunk_crc():
    """The CRC is calculated over type and data, not the length."""
    for data in (b'', b'\x00', MESSAGE, bytes(range(256)) * 4):
        chunk = PNGChunk.create('ruSt', data)

        assert chunk.crc == zlib.crc32(b'ruSt' + data)


def test_create_chunk_invalid_type():
    with pytest.raises(InvalidChunkTypeException):
        PNGChunk.create('Rust', MESSAGE)


def test_chunk_from_bytes():
    chunk = PNGChunk.from_bytes(build_raw(42, b'RuSt', MESSAGE, MESSAGE_CRC))

    assert chunk.length == 42
    assert str(chunk.type) == 'RuSt'
    assert chunk.data_as_string() == 'This is where your secret message will be!'
    assert chunk.crc == MESSAGE_CRC


def test_chunk_pack():
    chunk = PNGChunk.create('RuSt', MESSAGE)

    assert chunk.pack() == build_raw(42, b'RuSt', MESSAGE, MESSAGE_CRC)
    assert chunk.raw == chunk.pack()


@pytest.mark.parametrize('data', [b'', b'hello', bytes(range(256)), b'\xff' * 1000])
def test_chunk_unpack_pack(data):
    chunk = PNGChunk.create('ruSt', data)

    assert PNGChunk.from_bytes(chunk.pack()) == chunk


def test_chunk_wrong_crc():
    with pytest.raises(CRCException) as e:
        PNGChunk.from_bytes(build_raw(42, b'RuSt', MESSAGE, MESSAGE_CRC - 1))

    assert e.value.expected == MESSAGE_CRC
    assert e.value.found == MESSAGE_CRC - 1
    assert e.value.chain == ['crc']


def test_chunk_invalid_type():
    raw = build_raw(42, b'Rust', MESSAGE, zlib.crc32(b'Rust' + MESSAGE))

    with pytest.raises(InvalidChunkTypeException) as e:
        PNGChunk.from_bytes(raw)

    assert e.value.chain == ['type']


def test_chunk_length_too_big():
    """The declared length goes past the end of the buffer"""
    raw = build_raw(43, b'RuSt', MESSAGE, MESSAGE_CRC)

    with pytest.raises(UnpackException) as e:
        PNGChunk.from_bytes(raw)

    assert not isinstance(e.value, CRCException)
    assert e.value.chain[0] in ('data', 'crc')


def test_chunk_length_over_maximum():
    raw = build_raw(MAX_LENGTH + 1, b'RuSt', MESSAGE, MESSAGE_CRC)

    with pytest.raises(UnpackException) as e:
        PNGChunk.from_bytes(raw)

    assert e.value.chain == ['length']


@pytest.mark.parametrize('size', [0, 3, 4, 7, 8, 12, 53])
def test_chunk_truncated(size):
    raw = build_raw(42, b'RuSt', MESSAGE, MESSAGE_CRC)

    with pytest.raises(UnpackException):
        PNGChunk.from_bytes(raw[:size])


def test_chunk_trailing_data():
    raw = build_raw(42, b'RuSt', MESSAGE, MESSAGE_CRC)

    with pytest.raises(UnpackException):
        PNGChunk.from_bytes(raw + b'\x00')


def test_chunk_unpack_from_stream():
    """Unpacking leaves the stream right after the chunk"""
    raw = build_raw(42, b'RuSt', MESSAGE, MESSAGE_CRC)
    stream = Stream(raw + b'miao')

    chunk = PNGChunk.unpack(stream)

    assert chunk.length == 42
    assert stream.tell() == len(raw)
    assert stream.read_all() == b'miao'


def test_chunk_tampering():
    """Flipping any bit of a packed chunk must be detected."""
    raw = PNGChunk.create('ruSt', b'hello').pack()

    for idx in range(len(raw) * 8):
        tampered = bytearray(raw)
        tampered[idx // 8] ^= 1 << (idx % 8)

        with pytest.raises((UnpackException, InvalidChunkTypeException)):
            PNGChunk.from_bytes(bytes(tampered))


def test_chunk_data_not_utf8():
    chunk = PNGChunk.create('ruSt', b'\xff\xfe\x00')

    with pytest.raises(ChunkEncodingException):
        chunk.data_as_string()

    assert chunk.preview() == ''


def test_chunk_str():
    chunk = PNGChunk.create('RuSt', MESSAGE)

    assert str(chunk) == (
        'type: RuSt\n'
        'length: 42\n'
        'crc: 0xabd1d84e\n'
        'data: This is where your secret message will be!\n'
    )
    assert repr(chunk) == '<PNGChunk(type=RuSt,length=42,crc=0xabd1d84e)>'


def test_chunk_constructor_trusts_checksum():
    """Only create() calculates the CRC: a wrong one is caught when parsed back"""
    chunk = PNGChunk(ChunkType('ruSt'), b'hello', 0)

    with pytest.raises(CRCException):
        PNGChunk.from_bytes(chunk.pack())

    assert PNGChunk.from_bytes(PNGChunk.create('ruSt', b'hello').pack()).crc == zlib.crc32(b'ruSthello')
