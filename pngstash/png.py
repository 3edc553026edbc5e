'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html> and
is available a full test-suite with a lot of PNG images covering all
the possible cases at <http://www.schaik.com/pngsuite/>.

At this level a PNG file is only a signature followed by a list of chunks: nothing
here interprets the image data, so any chunk can be added or removed without
touching the pixels.

# Critical chunks

 1. IHDR: contains image's width, height, bit depth, color type, compression method, filter method and interlace method
 2. PLTE: contains the palette data
 3. IDAT: contains the actual image data (compressed)
 4. IEND: is the terminator chunk
'''
import logging
from typing import Iterable, List, Optional

from .chunk import PNGChunk
from .exceptions import (
    ChunkNotFoundException,
    InvalidChunkTypeException,
    MagicException,
    UnpackException,
)
from .streams import Stream


logger = logging.getLogger(__name__)


class PNGHeader(object):
    magic = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'

    @classmethod
    def unpack(cls, stream: Stream) -> bytes:
        try:
            value = stream.read(len(cls.magic))
        except UnpackException as e:
            raise MagicException(f'file too short for the signature ({e.message})', chain=['header'])

        if value != cls.magic:
            raise MagicException(f'the magic doesn\'t correspond: {value!r}', chain=['header'])

        return value


class PNGFile(object):
    """Signature and an ordered list of chunks.

    The order of the chunks is preserved by every operation; nothing is enforced
    about the types of the chunks (duplicates included), the lookup
    operations act on the first chunk with the given name."""

    def __init__(self, chunks: Iterable[PNGChunk] = ()):
        self.chunks: List[PNGChunk] = list(chunks)

    @classmethod
    def unpack(cls, stream: Stream) -> 'PNGFile':
        logger.debug('unpacking PNG from %r' % stream)
        PNGHeader.unpack(stream)

        png = cls()
        while not stream.is_exhausted():
            offset = stream.tell()
            try:
                chunk = PNGChunk.unpack(stream)
            except (UnpackException, InvalidChunkTypeException) as e:
                e.chain.insert(0, f'chunks[{len(png.chunks)}]@{offset:#x}')
                raise

            png.chunks.append(chunk)

        logger.debug('unpacked %d chunks' % len(png.chunks))

        return png

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'PNGFile':
        with Stream(bytes(raw)) as stream:
            return cls.unpack(stream)

    @classmethod
    def from_file(cls, path) -> 'PNGFile':
        with Stream(str(path)) as stream:
            return cls.unpack(stream)

    def append(self, chunk: PNGChunk) -> None:
        logger.debug('appending chunk %r' % chunk)
        self.chunks.append(chunk)

    def get_chunk_by_name(self, name: str) -> Optional[PNGChunk]:
        for chunk in self.chunks:
            if str(chunk.type) == name:
                return chunk

        return None

    def get_chunks_by_name(self, name: str) -> List[PNGChunk]:
        return [_ for _ in self.chunks if str(_.type) == name]

    def remove_chunk(self, name: str) -> PNGChunk:
        '''Remove the first chunk with the given name and return it.'''
        for idx, chunk in enumerate(self.chunks):
            if str(chunk.type) == name:
                logger.debug('removing chunk %r at index %d' % (chunk, idx))
                return self.chunks.pop(idx)

        raise ChunkNotFoundException(name)

    def pack(self) -> bytes:
        return PNGHeader.magic + b''.join(_.pack() for _ in self.chunks)

    @property
    def raw(self) -> bytes:
        return self.pack()

    @property
    def size(self) -> int:
        return len(PNGHeader.magic) + sum(_.size for _ in self.chunks)

    def __len__(self):
        return len(self.chunks)

    def __iter__(self):
        return iter(self.chunks)

    def __getitem__(self, item):
        return self.chunks[item]

    def __eq__(self, other):
        if not isinstance(other, PNGFile):
            return NotImplemented

        return self.chunks == other.chunks

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self.chunks))

    def __str__(self):
        msg = 'PNG file with %d chunks\n' % len(self.chunks)
        for idx, chunk in enumerate(self.chunks):
            msg += '[%02d] %s length=%d crc=0x%08x data=%r\n' % (
                idx,
                chunk.type,
                chunk.length,
                chunk.crc,
                chunk.preview(),
            )
        return msg
