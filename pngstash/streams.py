import io
import logging
import os

from .exceptions import UnpackException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: mainly we need reads that never go
    past the end of the data without noticing it.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to stream' % self._type.__name__)

        init_method()

        self.obj.seek(0, os.SEEK_END)
        self.length = self.obj.tell()
        self.obj.seek(0)

    def __repr__(self):
        return '<%s(%s, offset=%d, length=%d)>' % (
            self.__class__.__name__,
            self._type.__name__,
            self.tell(),
            self.length,
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes

    def close(self):
        self.obj.close()

    def tell(self):
        return self.obj.tell()

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

    @property
    def remaining(self):
        return self.length - self.tell()

    def is_exhausted(self):
        return self.remaining <= 0

    def read(self, size):
        '''Read exactly size bytes: the bound is checked before reading
        so a truncated input is an error and not a short result.'''
        offset = self.tell()
        if size < 0 or size > self.length - offset:
            raise UnpackException(
                f'trying to read {size} bytes at offset {offset} but only {self.length - offset} are available')

        return self.obj.read(size)

    def read_all(self):
        return self.obj.read()
