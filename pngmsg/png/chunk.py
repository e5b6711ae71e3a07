from ..core import Chunk
from .. import fields
from ..common import crc
from ..exceptions import InvalidTextException, TruncatedException
from ..meta import Endianess
from ..properties import Dependency, LengthOf
from ..streams import Stream
from .chunk_type import ChunkTypeField


# the length is encoded as an unsigned 32 bits integer
MAX_LENGTH = 0xffffffff


class PNGChunk(Chunk):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

    The length counts only the bytes of data, the crc field is network-byte-order
    CRC-32 computed over the chunk type and chunk data, but not the length.

    Both length and crc are derived from type and data so that they can't go
    out of sync: unpacking a chunk whose declared crc doesn't correspond fails.
    '''
    length = fields.StructField('I', equals_to=LengthOf('.data', maximum=MAX_LENGTH), endianess=Endianess.BIG_ENDIAN)
    type   = ChunkTypeField()
    data   = fields.StringField(Dependency('.length'))
    crc    = crc.CRCField(['type', 'data'], endianess=Endianess.BIG_ENDIAN)  # network byte order

    # length, type and crc with empty data
    MIN_SIZE = 12

    def __init__(self, chunk_type, data):
        super().__init__(type=chunk_type, data=bytes(data))

    def __str__(self):
        return f'{self.type!r} length={self.length} crc=0x{self.crc:08x}'

    def data_as_text(self) -> str:
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidTextException(str(e)) from e

    def serialize(self) -> bytes:
        return self.pack()

    @classmethod
    def deserialize(cls, buffer):
        '''Returns the chunk at the start of buffer and the bytes following it.'''
        if len(buffer) < cls.MIN_SIZE:
            raise TruncatedException(cls.MIN_SIZE, len(buffer))

        stream = Stream(buffer)
        chunk = cls.unpack(stream)

        return chunk, stream.read_all()
