import struct

import pytest

from pngmsg.exceptions import ChecksumException, InvalidTextException, TruncatedException
from pngmsg.png import ChunkType, PNGChunk
from pngmsg.png.chunk import MAX_LENGTH


MESSAGE = 'This is where your secret message will be!'


def build_raw(length=42, chunk_type=b'RuSt', data=MESSAGE.encode(), crc=2882656334):
    return struct.pack('>I', length) + chunk_type + data + struct.pack('>I', crc)


def test_chunk_new():
    chunk = PNGChunk(ChunkType.from_text('RuSt'), MESSAGE.encode())

    assert chunk.length == 42
    assert chunk.type == ChunkType.from_text('RuSt')
    assert chunk.data == MESSAGE.encode()
    assert chunk.crc == 2882656334
    assert chunk.type.is_critical()


def test_chunk_length_and_crc_are_read_only():
    chunk = PNGChunk(ChunkType.from_text('RuSt'), b'')

    with pytest.raises(AttributeError):
        chunk.crc = 0

    with pytest.raises(AttributeError):
        chunk.data = b'kebab'


def test_chunk_deserialize():
    raw = build_raw()

    chunk, remaining = PNGChunk.deserialize(raw)

    assert remaining == b''
    assert chunk.length == 42
    assert str(chunk.type) == 'RuSt'
    assert chunk.crc == 2882656334
    assert chunk.data_as_text() == MESSAGE


def test_chunk_serialize():
    chunk = PNGChunk(ChunkType.from_text('RuSt'), MESSAGE.encode())

    raw = chunk.serialize()

    assert raw == build_raw()
    assert len(raw) == 12 + chunk.length


def test_chunk_roundtrip_w_remaining():
    chunk = PNGChunk(ChunkType.from_text('ruSt'), b'\x00\x01\xff')

    parsed, remaining = PNGChunk.deserialize(chunk.serialize() + b'trailing')

    assert parsed == chunk
    assert remaining == b'trailing'


def test_chunk_empty_data():
    chunk = PNGChunk(ChunkType.from_text('IEND'), b'')

    raw = chunk.serialize()

    assert raw == b'\x00\x00\x00\x00IEND\xae\x42\x60\x82'
    assert PNGChunk.deserialize(raw) == (chunk, b'')


def test_chunk_checksum_sensitivity():
    chunk = PNGChunk(ChunkType.from_text('RuSt'), b'kebab')

    payload = bytearray(chunk.type.raw + chunk.data)
    for idx in range(len(payload) * 8):
        flipped = bytearray(payload)
        flipped[idx // 8] ^= 1 << (idx % 8)
        other = PNGChunk(ChunkType.from_bytes(flipped[:4]), flipped[4:])

        assert other.crc != chunk.crc


def test_chunk_truncated():
    raw = PNGChunk(ChunkType.from_text('RuSt'), b'kebab').serialize()

    for size in range(1, len(raw)):
        with pytest.raises(TruncatedException):
            PNGChunk.deserialize(raw[:size])


def test_chunk_checksum_mismatch():
    raw = bytearray(build_raw())
    raw[-1] ^= 0x01

    with pytest.raises(ChecksumException) as excinfo:
        PNGChunk.deserialize(bytes(raw))

    assert excinfo.value.computed == 2882656334
    assert excinfo.value.chain == ['crc']


def test_chunk_invalid_type_is_parseable():
    chunk = PNGChunk(ChunkType.from_bytes(b'\x00\x01\x02\x03'), b'kebab')

    parsed, _ = PNGChunk.deserialize(chunk.serialize())

    assert parsed == chunk
    assert not parsed.type.is_valid()


def test_chunk_data_as_text_invalid():
    chunk = PNGChunk(ChunkType.from_text('RuSt'), b'\xff\xfe kebab')

    with pytest.raises(InvalidTextException):
        chunk.data_as_text()


def test_chunk_equality():
    chunk_type = ChunkType.from_text('RuSt')

    assert PNGChunk(chunk_type, b'kebab') == PNGChunk(chunk_type, b'kebab')
    assert PNGChunk(chunk_type, b'kebab') != PNGChunk(chunk_type, b'kebap')
    assert PNGChunk(chunk_type, b'kebab') != PNGChunk(ChunkType.from_text('ruSt'), b'kebab')


class HugeData:
    """Stand-in for a payload that can't be encoded by the length field."""

    def __len__(self):
        return MAX_LENGTH + 1


def test_chunk_length_out_of_range():
    chunk = PNGChunk.from_fields(type=ChunkType.from_text('ruSt'), data=HugeData())

    with pytest.raises(ValueError):
        chunk.length

    with pytest.raises(ValueError):
        chunk.serialize()
