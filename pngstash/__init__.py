"""
# pngstash: hide messages inside PNG files.

A PNG file is a signature followed by chunks, each one

 1. carries a type, a four letters name whose case encodes some properties
 2. carries its own length and a CRC of type and data, so it's self-delimiting
    and corruption is detected

Decoders skip the ancillary chunks they don't know, so adding one with a
private type is a way to put arbitrary data in a file that remains a valid image.

Two basic main operations are defined for chunks and files:

 1. unpack(): read the binary data and build the representation, verifying it
 2. pack(): encode the representation into binary data

and the following holds

    PNGFile.from_bytes(png.pack()) == png
"""
from .chunk_type import ChunkType
from .chunk import PNGChunk
from .png import PNGFile, PNGHeader
from .exceptions import (
    PNGStashException,
    InvalidChunkTypeException,
    UnpackException,
    MagicException,
    CRCException,
    ChunkEncodingException,
    ChunkNotFoundException,
)
