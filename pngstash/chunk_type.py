'''
# Chunk type

Four bytes restricted to the ASCII letters: the case of each letter, i.e. the
bit 5 (value 32) of each byte, encodes a property of the chunk

 1. ancillary bit (first byte): unset means the chunk is critical, the image can't be
    displayed without understanding it
 2. private bit (second byte): unset means the chunk is part of the public specification
 3. reserved bit (third byte): must be unset, a type with this bit set is invalid
 4. safe-to-copy bit (fourth byte): set means editors can copy the chunk even if they
    don't recognize it

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
import logging

from bitstring import Bits

from .exceptions import InvalidChunkTypeException


logger = logging.getLogger(__name__)

# position of bit 5 inside a byte when reading MSB first
PROPERTY_BIT_OFFSET = 2


class ChunkType(object):
    """Immutable value representing the type of a chunk.

    You can build it from raw bytes or from text

        ChunkType(b'RuSt') == ChunkType('RuSt')

    an invalid type raises InvalidChunkTypeException."""
    __slots__ = ('_raw', '_bits')

    def __init__(self, value):
        if isinstance(value, str):
            value = self._encode(value)

        if not isinstance(value, (bytes, bytearray)):
            raise InvalidChunkTypeException(
                f'chunk type must be bytes or str, not {value.__class__.__name__}')

        raw = bytes(value)
        self._validate(raw)

        self._raw = raw
        self._bits = Bits(raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'ChunkType':
        return cls(bytes(raw))

    @classmethod
    def from_str(cls, text: str) -> 'ChunkType':
        return cls(cls._encode(text))

    @staticmethod
    def _encode(text):
        try:
            return text.encode('ascii')
        except UnicodeEncodeError:
            raise InvalidChunkTypeException(f'chunk type {text!r} contains non ASCII characters')

    @staticmethod
    def _validate(raw):
        if len(raw) != 4:
            raise InvalidChunkTypeException(f'chunk type must be 4 bytes long, {raw!r} is {len(raw)}')

        # bytes.isalpha() considers only ASCII letters
        if not raw.isalpha():
            raise InvalidChunkTypeException(f'chunk type {raw!r} must contain only ASCII letters')

        if not raw[2:3].isupper():
            raise InvalidChunkTypeException(f'chunk type {raw!r} has the reserved bit set')

    def _property_bit(self, idx: int) -> bool:
        return self._bits[idx * 8 + PROPERTY_BIT_OFFSET]

    def bytes(self) -> bytes:
        return self._raw

    def is_critical(self) -> bool:
        return not self._property_bit(0)

    def is_public(self) -> bool:
        return not self._property_bit(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._property_bit(2)

    def is_safe_to_copy(self) -> bool:
        return self._property_bit(3)

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return f'<{self.__class__.__name__}({self})>'
