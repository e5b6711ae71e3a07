'''
The operations exposed to the user: each one reads the whole file, works on
the in-memory PNGFile and, when needed, writes it back.
'''
import logging

from .exceptions import (
    ChunkNotFoundException,
    IOFailureException,
    InvalidCharacterException,
    InvalidTextException,
)
from .png import ChunkType, PNGChunk, PNGFile


logger = logging.getLogger(__name__)


def load(path) -> PNGFile:
    logger.debug('reading \'%s\'' % path)
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise IOFailureException(path, e.strerror or str(e)) from e

    return PNGFile.parse(data)


def save(png: PNGFile, path):
    data = png.serialize()

    logger.debug('writing \'%s\'' % path)
    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise IOFailureException(path, e.strerror or str(e)) from e


def encode(path, chunk_type: str, message: str, output=None) -> PNGChunk:
    png = load(path)

    try:
        data = message.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidTextException(str(e)) from e

    chunk = PNGChunk(ChunkType.from_text(chunk_type), data)

    if not chunk.type.is_valid():
        logger.warning(f'chunk type \'{chunk_type}\' has the reserved bit set, readers could reject it')

    png.append_chunk(chunk)
    save(png, output if output is not None else path)

    return chunk


def decode(path, chunk_type: str) -> str:
    png = load(path)

    chunk = png.find_chunk_by_type(chunk_type)

    if chunk is None:
        raise ChunkNotFoundException(chunk_type)

    return chunk.data_as_text()


def remove(path, chunk_type: str) -> PNGChunk:
    png = load(path)

    chunk = png.remove_chunk_by_type(chunk_type)

    save(png, path)

    return chunk


def _type_name(chunk_type: ChunkType) -> str:
    try:
        return chunk_type.to_text()
    except InvalidCharacterException:
        return chunk_type.raw.hex()


def dump_chunks(png: PNGFile) -> str:
    lines = [' Idx Type     Length        CRC Critical Public Safe-to-copy Valid']
    for idx, chunk in enumerate(png.list_chunks()):
        chunk_type = chunk.type
        lines.append(
            f'[{idx:02d}] {_type_name(chunk_type):<8} {chunk.length:>6} 0x{chunk.crc:08x} '
            f'{chunk_type.is_critical()!s:<8} {chunk_type.is_public()!s:<6} '
            f'{chunk_type.is_safe_to_copy()!s:<12} {chunk_type.is_valid()!s}')

    return '\n'.join(lines)


def print_chunks(path) -> str:
    return dump_chunks(load(path))
