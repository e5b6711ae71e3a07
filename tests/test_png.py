import pytest

from pngmsg.exceptions import (
    ChecksumException,
    ChunkNotFoundException,
    MagicException,
    TruncatedException,
)
from pngmsg.png import ChunkType, PNGChunk, PNGFile, PNGHeader, SIGNATURE


def build_chunk(chunk_type, data):
    return PNGChunk(ChunkType.from_text(chunk_type), data)


def build_png():
    return PNGFile([
        build_chunk('FrSt', b'I am the first chunk'),
        build_chunk('miDl', b'I am another chunk'),
        build_chunk('LASt', b'I am the last chunk'),
    ])


def test_header():
    """Check header is right"""
    png_header = PNGHeader()

    assert png_header.magic == b'\x89PNG\x0d\x0a\x1a\x0a'
    assert png_header.raw == SIGNATURE


def test_png_file(png_data):
    """Check unpacking a PNG file written by Pillow is fine"""
    png = PNGFile.parse(png_data)

    chunks = png.list_chunks()

    assert chunks[0].type == ChunkType.from_text('IHDR')
    assert chunks[0].length == 13
    assert chunks[-1].type == ChunkType.from_text('IEND')
    assert all(_.type.is_valid() for _ in chunks)

    assert png.serialize() == png_data


def test_png_empty():
    png = PNGFile()

    assert len(png) == 0
    assert png.serialize() == SIGNATURE
    assert PNGFile.parse(SIGNATURE) == png


def test_png_roundtrip():
    png = build_png()

    raw = png.serialize()

    assert raw.startswith(SIGNATURE)
    assert raw[len(SIGNATURE):] == b''.join(_.serialize() for _ in png)
    assert PNGFile.parse(raw) == png


def test_png_invalid_header():
    raw = build_png().serialize()

    with pytest.raises(MagicException) as excinfo:
        PNGFile.parse(b'\x88' + raw[1:])

    assert excinfo.value.chain == ['header', 'magic']

    with pytest.raises(MagicException):
        PNGFile.parse(SIGNATURE[:5])

    with pytest.raises(MagicException):
        PNGFile.parse(b'')


def test_png_corrupted_chunk():
    png = build_png()
    raw = bytearray(png.serialize())

    # the last byte of data of the second chunk
    offset = len(SIGNATURE) + png.list_chunks()[0].size + png.list_chunks()[1].size - 5
    raw[offset] ^= 0xff

    with pytest.raises(ChecksumException) as excinfo:
        PNGFile.parse(bytes(raw))

    assert excinfo.value.chain == ['chunks[1]', 'crc']


def test_png_trailing_bytes():
    raw = build_png().serialize()

    with pytest.raises(TruncatedException) as excinfo:
        PNGFile.parse(raw + b'\x00\x00\x00')

    assert excinfo.value.chain == ['chunks[3]', 'length']

    with pytest.raises(TruncatedException):
        PNGFile.parse(raw[:-1])


def test_png_append_chunk():
    png = build_png()
    chunk = build_chunk('TeSt', b'Message')

    png.append_chunk(chunk)

    assert len(png) == 4
    assert png.list_chunks()[-1] is chunk
    assert png.find_chunk_by_type('TeSt') is chunk


def test_png_find_chunk_by_type():
    png = build_png()

    chunk = png.find_chunk_by_type('miDl')

    assert chunk.data_as_text() == 'I am another chunk'
    assert png.find_chunk_by_type('zzZz') is None
    assert len(png) == 3


def test_png_remove_first_chunk_of_type():
    png = build_png()
    first = build_chunk('teSt', b'first')
    second = build_chunk('teSt', b'second')

    png.append_chunk(first)
    png.append_chunk(second)

    removed = png.remove_chunk_by_type('teSt')

    assert removed == first
    assert [_ for _ in png if _.type.matches('teSt')] == [second]
    assert len(png) == 4


def test_png_remove_not_found():
    png = build_png()
    before = png.list_chunks()

    with pytest.raises(ChunkNotFoundException) as excinfo:
        png.remove_chunk_by_type('zzZz')

    assert excinfo.value.chunk_type == 'zzZz'
    assert png.list_chunks() == before


def test_png_list_chunks_is_a_copy():
    png = build_png()

    chunks = png.list_chunks()

    assert isinstance(chunks, tuple)
    assert [str(_.type) for _ in chunks] == ['FrSt', 'miDl', 'LASt']
