import logging
from typing import Optional, Tuple

from ..core import Chunk
from .. import fields
from ..exceptions import ChunkNotFoundException, MagicException, PNGMsgException
from ..streams import Stream
from .chunk import PNGChunk


logger = logging.getLogger(__name__)

SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class PNGHeader(Chunk):
    magic = fields.StringField(8, default=SIGNATURE, is_magic=True)


class PNGFile(object):
    '''The whole file: the signature followed by the chunks, in order.

    Differently from the chunks, the file is mutable: chunks can be appended
    and removed, multiple chunks with the same type are allowed.'''
    SIGNATURE = SIGNATURE

    def __init__(self, chunks=None):
        self.header = PNGHeader()
        self._chunks = list(chunks) if chunks is not None else []

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._chunks!r})>'

    def __eq__(self, other):
        if not isinstance(other, PNGFile):
            return NotImplemented

        return self._chunks == other._chunks

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    @classmethod
    def parse(cls, buffer) -> "PNGFile":
        '''The data must be entirely consumed by the chunks, the first failure
        aborts the parsing.'''
        if len(buffer) < len(SIGNATURE):
            raise MagicException(bytes(buffer), chain=['header'])

        stream = Stream(buffer)

        try:
            PNGHeader.unpack(stream)
        except PNGMsgException as e:
            e.chain.insert(0, 'header')
            raise

        chunks = []
        while not stream.at_end():
            try:
                chunk = PNGChunk.unpack(stream)
            except PNGMsgException as e:
                e.chain.insert(0, f'chunks[{len(chunks)}]')
                raise

            logger.debug('unpacked chunk #%d %s', len(chunks), chunk)
            chunks.append(chunk)

        return cls(chunks)

    def serialize(self) -> bytes:
        value = self.header.pack()
        for chunk in self._chunks:
            value += chunk.serialize()

        return value

    def append_chunk(self, chunk: PNGChunk):
        self._chunks.append(chunk)

    def _index_of(self, chunk_type: str) -> Optional[int]:
        for index, chunk in enumerate(self._chunks):
            if chunk.type.matches(chunk_type):
                return index

        return None

    def remove_chunk_by_type(self, chunk_type: str) -> PNGChunk:
        '''Only the first chunk with the given type is removed.'''
        index = self._index_of(chunk_type)

        if index is None:
            raise ChunkNotFoundException(chunk_type)

        return self._chunks.pop(index)

    def find_chunk_by_type(self, chunk_type: str) -> Optional[PNGChunk]:
        index = self._index_of(chunk_type)

        return self._chunks[index] if index is not None else None

    def list_chunks(self) -> Tuple[PNGChunk, ...]:
        return tuple(self._chunks)
