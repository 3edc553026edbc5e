import io
import struct

import pytest
from PIL import Image

from pngstash import PNGChunk, PNGFile


@pytest.fixture
def minimal_png():
    '''Signature, IHDR and IEND: the smallest thing looking like a PNG.'''
    ihdr = struct.pack('>IIBBBBB', 1, 1, 8, 2, 0, 0, 0)
    return PNGFile([
        PNGChunk.create('IHDR', ihdr),
        PNGChunk.create('IEND', b''),
    ])


@pytest.fixture
def image_png_raw():
    '''A real image encoded by pillow'''
    image = Image.new('RGB', (3, 2), color=(0xff, 0x00, 0x00))
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def png_path(tmp_path, image_png_raw):
    path = tmp_path / 'image.png'
    path.write_bytes(image_png_raw)

    return path
