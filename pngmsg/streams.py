import io
import logging

from .exceptions import TruncatedException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes-like objects to
    uniform their properties: mainly we need a read() that refuses
    to return less data than requested.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to use as a stream' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._type.__name__}, offset={self.tell()})>'

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    init_memoryview = init_bytearray

    def remaining(self) -> int:
        with self.obj.getbuffer() as view:
            return len(view) - self.obj.tell()

    def at_end(self) -> bool:
        return self.remaining() == 0

    def read_exactly(self, size: int) -> bytes:
        data = self.obj.read(size)

        if len(data) != size:
            raise TruncatedException(size, len(data))

        return data

    def read_all(self) -> bytes:
        '''Returns all the data from the actual offset to the end.'''
        return self.obj.read()
