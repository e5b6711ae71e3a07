"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable from a stream.

A Field doesn't hold a value: it describes how a value is encoded, the value
lives in the Chunk instance the field is declared into.
"""
import logging
import struct

from .meta import FieldBase, Endianess
from .properties import Dependency
from .exceptions import MagicException, UnpackException


class Field(FieldBase):
    """Base class to subclass from

    If "equals_to" is indicated the field is derived: its value is not stored
    but recomputed from the chunk each time it's accessed, the value found
    while unpacking is only checked against it."""

    def __init__(self, name=None, default=None, equals_to=None, endianess=Endianess.LITTLE_ENDIAN, is_magic=False):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.default = default
        self.equals_to = equals_to
        self.endianess = endianess
        self.is_magic = is_magic

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name})>'

    def is_derived(self) -> bool:
        return self.equals_to is not None

    def derive(self, instance):
        return self.equals_to.resolve(instance)

    def mismatch(self, declared, derived) -> UnpackException:
        """The exception to raise when the value unpacked doesn't correspond
        to the derived one."""
        return UnpackException(f"field '{self.name}' is {declared!r} but should be {derived!r}")

    def check_magic(self, value):
        if self.is_magic and value != self.default:
            raise MagicException(value)

    def pack(self, value) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.pack() not implemented")

    def unpack(self, stream, values):
        """Read the value from the stream, "values" contains what has been
        already unpacked from the fields preceding this one."""
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    @property
    def size(self):
        return struct.calcsize(self.get_format())

    def pack(self, value) -> bytes:
        try:
            return struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f"field '{self.name}' can't encode {value!r}: {e}") from e

    def unpack(self, stream, values):
        raw = stream.read_exactly(self.size)
        value = struct.unpack(self.get_format(), raw)[0]

        self.check_magic(value)

        return value


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The length can be fixed or a Dependency resolved against the fields
    already unpacked."""

    def __init__(self, n=None, **kw):
        if n is None and kw.get('default') is None:
            raise ValueError("StringField must have 'n' or 'default' indicated!")

        self.n = n if n is not None else len(kw['default'])

        kw.setdefault('default', b'' if isinstance(self.n, Dependency) else b'\x00' * self.n)

        super().__init__(**kw)

    def get_length(self, values) -> int:
        if isinstance(self.n, Dependency):
            return self.n.resolve(values)

        return self.n

    def pack(self, value) -> bytes:
        value = bytes(value)
        if not isinstance(self.n, Dependency) and len(value) != self.n:
            raise ValueError(f"field '{self.name}' can only accept binary strings of length {self.n}")

        return value

    def unpack(self, stream, values):
        length = self.get_length(values)
        self.logger.debug("reading %d bytes for field '%s'", length, self.name)

        value = stream.read_exactly(length)

        self.check_magic(value)

        return value
