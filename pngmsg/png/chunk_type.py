'''
The chunk type is a 4-byte code restricted to ASCII letters: the case of each
letter, i.e. bit 5 of each byte, encodes a property of the chunk

 1. ancillary bit (first byte): uppercase means critical
 2. private bit (second byte): uppercase means public
 3. reserved bit (third byte): must be uppercase in conforming types
 4. safe-to-copy bit (fourth byte): lowercase means safe to copy
'''
import string

from bitstring import Bits

from ..enum import ChunkTypeFlag
from ..exceptions import InvalidLengthException, InvalidCharacterException
from ..fields import Field


ASCII_LETTERS = string.ascii_letters.encode('ascii')

# with the MSB first ordering of bitstring, 0x20 is the third bit of a byte
PROPERTY_BIT = 2


class ChunkType(object):
    LENGTH = 4

    def __init__(self, raw):
        raw = bytes(raw)

        if len(raw) != self.LENGTH:
            raise InvalidLengthException(len(raw))

        self._raw = raw
        self._bits = Bits(raw)

    @classmethod
    def from_bytes(cls, raw) -> "ChunkType":
        '''No validation is performed on the content, use is_valid() for that.'''
        return cls(raw)

    @classmethod
    def from_text(cls, text: str) -> "ChunkType":
        if len(text) != cls.LENGTH:
            raise InvalidLengthException(len(text))

        for character in text:
            if character not in string.ascii_letters:
                raise InvalidCharacterException(character)

        return cls(text.encode('ascii'))

    @property
    def raw(self) -> bytes:
        return self._raw

    def _is_property_bit_set(self, index) -> bool:
        return self._bits[index * 8 + PROPERTY_BIT]

    def is_critical(self) -> bool:
        return not self._is_property_bit_set(0)

    def is_public(self) -> bool:
        return not self._is_property_bit_set(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._is_property_bit_set(2)

    def is_safe_to_copy(self) -> bool:
        return self._is_property_bit_set(3)

    def is_alphabetic(self) -> bool:
        return all(_ in ASCII_LETTERS for _ in self._raw)

    def is_valid(self) -> bool:
        return self.is_alphabetic() and self.is_reserved_bit_valid()

    @property
    def flags(self) -> ChunkTypeFlag:
        flags = ChunkTypeFlag.NONE
        for index, flag in enumerate((
                ChunkTypeFlag.ANCILLARY,
                ChunkTypeFlag.PRIVATE,
                ChunkTypeFlag.RESERVED,
                ChunkTypeFlag.SAFE_TO_COPY)):
            if self._is_property_bit_set(index):
                flags |= flag

        return flags

    def to_text(self) -> str:
        '''Codes with bytes outside of ASCII can't be rendered.'''
        for byte in self._raw:
            if byte > 0x7f:
                raise InvalidCharacterException(bytes([byte]))

        return self._raw.decode('ascii')

    def matches(self, text: str) -> bool:
        try:
            return self._raw == text.encode('ascii')
        except UnicodeEncodeError:
            return False

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._raw!r})>'

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)


class ChunkTypeField(Field):
    '''Un/Pack a ChunkType, without any check on its content.'''

    def __init__(self, **kw):
        super().__init__(default=ChunkType(b'\x00' * ChunkType.LENGTH), **kw)

    def pack(self, value) -> bytes:
        return value.raw

    def unpack(self, stream, values):
        return ChunkType.from_bytes(stream.read_exactly(ChunkType.LENGTH))
