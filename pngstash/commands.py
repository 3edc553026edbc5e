'''
Operations used by the command line: each one loads the file, works on the
chunks and, when something changed, writes the file back.

The original file is replaced only when the new content is completely written,
so a failure leaves it untouched. The temporary file is created beside the
real file (symlinks are resolved), so the directory must be writable too.
'''
import logging
import os
import shutil
import tempfile

from .chunk import PNGChunk
from .chunk_type import ChunkType
from .exceptions import ChunkNotFoundException
from .png import PNGFile


logger = logging.getLogger(__name__)


def load_png(path) -> PNGFile:
    logger.debug('loading PNG from \'%s\'' % path)
    return PNGFile.from_file(path)


def write_png(path, png: PNGFile) -> None:
    data = png.pack()
    path = os.path.realpath(path)
    directory = os.path.dirname(path)

    fd, tmp_path = tempfile.mkstemp(prefix='.pngstash-', dir=directory)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise

    logger.debug('written %d bytes to \'%s\'' % (len(data), path))


def chunk_from_strings(chunk_type: str, message: str) -> PNGChunk:
    return PNGChunk.create(ChunkType.from_str(chunk_type), message.encode('utf-8'))


def encode(path, chunk_type: str, message: str) -> PNGChunk:
    chunk = chunk_from_strings(chunk_type, message)

    png = load_png(path)
    png.append(chunk)
    write_png(path, png)

    logger.info('message encoded in chunk %s' % chunk.type)

    return chunk


def decode(path, chunk_type: str) -> str:
    png = load_png(path)

    chunk = png.get_chunk_by_name(chunk_type)
    if chunk is None:
        raise ChunkNotFoundException(chunk_type)

    return chunk.data_as_string()


def remove(path, chunk_type: str) -> PNGChunk:
    png = load_png(path)
    chunk = png.remove_chunk(chunk_type)
    write_png(path, png)

    logger.info('removed chunk %r' % chunk)

    return chunk


def print_chunks(path) -> str:
    return str(load_png(path))
