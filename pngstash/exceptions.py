class PNGStashException(Exception):
    '''Base class to extend in order to throw exception in pngstash.

    It takes the message and a chain that represents the layer that caused
    the exception, the outermost layer first.
    '''

    def __init__(self, message='', chain=None):
        self.message = message
        self.chain = chain if chain is not None else []
        super().__init__(message)

    def __str__(self):
        if not self.chain:
            return self.message

        return '%s: %s' % ('.'.join(self.chain), self.message)


class InvalidChunkTypeException(PNGStashException):
    pass


class UnpackException(PNGStashException):
    pass


class MagicException(UnpackException):
    pass


class CRCException(UnpackException):
    '''The stored CRC doesn't match the one calculated over the data.'''

    def __init__(self, expected, found, chain=None):
        self.expected = expected
        self.found = found
        super().__init__(
            'CRC mismatch: expected 0x%08x, found 0x%08x' % (expected, found),
            chain=chain,
        )


class ChunkEncodingException(PNGStashException):
    pass


class ChunkNotFoundException(PNGStashException):

    def __init__(self, name, chain=None):
        self.name = name
        super().__init__(f'no chunk with name {name}', chain=chain)
