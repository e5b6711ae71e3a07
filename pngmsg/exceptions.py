class PNGMsgException(Exception):
    '''Base class to extend in order to throw exception in pngmsg.

    It takes an optional keyword argument that represents the chain of the layers
    that caused the exception: while unpacking, each layer the exception passes
    through prepends its own name, the exception object itself is re-raised unchanged.
    '''

    def __init__(self, *args, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(*args)

    def __str__(self):
        msg = super().__str__()
        if self.chain:
            msg = '%s (at %s)' % (msg, '.'.join(str(_) for _ in self.chain))
        return msg


class InvalidLengthException(PNGMsgException):

    def __init__(self, length, **kwargs):
        self.length = length
        super().__init__(f'chunk type must be 4 characters long, not {length}', **kwargs)


class InvalidCharacterException(PNGMsgException):

    def __init__(self, character, **kwargs):
        self.character = character
        super().__init__(f'{character!r} is not an ASCII letter', **kwargs)


class UnpackException(PNGMsgException):
    '''Something went wrong reading binary data.'''
    pass


class TruncatedException(UnpackException):

    def __init__(self, needed, available, **kwargs):
        self.needed = needed
        self.available = available
        super().__init__(f'needed {needed} bytes but only {available} are available', **kwargs)


class ChecksumException(UnpackException):

    def __init__(self, declared, computed, **kwargs):
        self.declared = declared
        self.computed = computed
        super().__init__(f'declared crc 0x{declared:08x} but computed 0x{computed:08x}', **kwargs)


class MagicException(UnpackException):
    '''The signature at the start of the data is not the expected one.'''

    def __init__(self, found, **kwargs):
        self.found = found
        super().__init__(f'wrong magic {found!r}', **kwargs)


class ChunkNotFoundException(PNGMsgException):

    def __init__(self, chunk_type, **kwargs):
        self.chunk_type = chunk_type
        super().__init__(f"no chunk with type '{chunk_type}'", **kwargs)


class InvalidTextException(PNGMsgException):

    def __init__(self, reason, **kwargs):
        self.reason = reason
        super().__init__(f'data is not valid UTF-8: {reason}', **kwargs)


class IOFailureException(PNGMsgException):
    '''Reading or writing a file failed; only the command layer raises this.'''

    def __init__(self, path, reason, **kwargs):
        self.path = path
        self.reason = reason
        super().__init__(f"I/O error on '{path}': {reason}", **kwargs)
