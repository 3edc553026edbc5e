'''
# PNG chunk

This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each integer field is intended big-endian.

    +--------+------+-----------------+-----+
    | length | type | data            | crc |
    +--------+------+-----------------+-----+
       4        4     length bytes       4

The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.
'''
import logging
import struct

from .chunk_type import ChunkType
from .common import crc
from .exceptions import (
    CRCException,
    ChunkEncodingException,
    InvalidChunkTypeException,
    UnpackException,
)
from .streams import Stream


logger = logging.getLogger(__name__)

LENGTH_FORMAT = '>I'
CRC_FORMAT = '>I'
# the length is a 4 bytes unsigned integer but its value is limited to 2^31 - 1
MAX_LENGTH = (1 << 31) - 1


def _read_field(stream, name, size):
    try:
        return stream.read(size)
    except UnpackException as e:
        e.chain.insert(0, name)
        raise


class PNGChunk(object):
    """
    There are two ways to obtain a chunk

     1. create(): from a type and the data, the CRC is calculated
     2. unpack()/from_bytes(): from binary data, the CRC is verified

    The length is always derived from the data.

    The constructor is internal: it trusts the checksum it is given, use one of
    the two classmethods above to obtain a chunk.
    """
    __slots__ = ('_type', '_data', '_crc')

    def __init__(self, chunk_type: ChunkType, data: bytes, checksum: int):
        self._type = chunk_type
        self._data = data
        self._crc = checksum

    @classmethod
    def create(cls, chunk_type, data: bytes) -> 'PNGChunk':
        if not isinstance(chunk_type, ChunkType):
            chunk_type = ChunkType(chunk_type)

        data = bytes(data)

        return cls(chunk_type, data, crc.calculate(chunk_type.bytes(), data))

    @classmethod
    def unpack(cls, stream: Stream) -> 'PNGChunk':
        offset = stream.tell()
        logger.debug('unpacking chunk at offset %d' % offset)

        length, = struct.unpack(LENGTH_FORMAT, _read_field(stream, 'length', 4))
        if length > MAX_LENGTH:
            raise UnpackException(f'length {length} exceeds the maximum allowed', chain=['length'])

        try:
            chunk_type = ChunkType(_read_field(stream, 'type', 4))
        except InvalidChunkTypeException as e:
            e.chain.insert(0, 'type')
            raise

        data = _read_field(stream, 'data', length)
        stored, = struct.unpack(CRC_FORMAT, _read_field(stream, 'crc', 4))

        calculated = crc.calculate(chunk_type.bytes(), data)
        if stored != calculated:
            raise CRCException(calculated, stored, chain=['crc'])

        logger.debug('unpacked chunk %s of length %d' % (chunk_type, length))

        return cls(chunk_type, data, stored)

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'PNGChunk':
        '''The buffer must contain exactly one chunk: trailing bytes raise
        UnpackException. Use unpack() with a Stream to read a chunk followed
        by other data.'''
        with Stream(bytes(raw)) as stream:
            chunk = cls.unpack(stream)

            if not stream.is_exhausted():
                raise UnpackException(f'{stream.remaining} trailing bytes after the chunk')

        return chunk

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def type(self) -> ChunkType:
        return self._type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        '''the size of the chunk once packed'''
        return 4 + 4 + self.length + 4

    def is_critical(self) -> bool:
        return self._type.is_critical()

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ChunkEncodingException(f'data of chunk {self._type} is not valid UTF-8: {e.reason}')

    def pack(self) -> bytes:
        return b''.join([
            struct.pack(LENGTH_FORMAT, self.length),
            self._type.bytes(),
            self._data,
            struct.pack(CRC_FORMAT, self._crc),
        ])

    @property
    def raw(self) -> bytes:
        return self.pack()

    def __eq__(self, other):
        if not isinstance(other, PNGChunk):
            return NotImplemented

        return (self._type, self._data, self._crc) == (other._type, other._data, other._crc)

    def __hash__(self):
        return hash((self._type, self._data, self._crc))

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._type,
            self.length,
            self._crc,
        )

    def preview(self) -> str:
        '''Text representation of the data, empty if it's not text'''
        try:
            return self.data_as_string()
        except ChunkEncodingException:
            return ''

    def __str__(self):
        return (
            'type: %s\n'
            'length: %d\n'
            'crc: 0x%08x\n'
            'data: %s\n'
        ) % (self._type, self.length, self._crc, self.preview())
