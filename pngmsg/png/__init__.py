'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

Here only the container is taken into account: a signature followed by
chunks, each one with its type and opaque data. The data of the chunks is
never interpreted, so that arbitrary chunks can be added, removed and read back.
'''
from .chunk_type import ChunkType, ChunkTypeField
from .chunk import PNGChunk
from .file import PNGFile, PNGHeader, SIGNATURE


__all__ = [
    'ChunkType',
    'ChunkTypeField',
    'PNGChunk',
    'PNGFile',
    'PNGHeader',
    'SIGNATURE',
]
