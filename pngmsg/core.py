"""
Core module for the abstraction of a binary format

"""
import logging
from typing import Tuple, List

from .fields import Field
from .meta import MetaChunk
from .exceptions import PNGMsgException


logger = logging.getLogger(__name__)


class Chunk(metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: the fields
    declared in the class body, in order, are its binary layout.

    Instances are immutable: the values of the non derived fields are passed
    to the constructor, the derived ones are computed when accessed.
    """

    def __init__(self, **kwargs):
        for field_name, field in self.get_fields():
            if field.is_derived():
                if field_name in kwargs:
                    raise TypeError(f"field '{field_name}' of {self.__class__.__name__} is derived and can't be set")
                continue

            self.__dict__[field_name] = kwargs.pop(field_name, field.default)

        if kwargs:
            raise TypeError(f"{self.__class__.__name__} has no field named {', '.join(kwargs)}")

    @classmethod
    def get_ordered_fields_name(cls) -> List[str]:
        return cls._meta.fields

    @classmethod
    def get_fields(cls) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, field) for each field.'''
        return [(_, cls._meta.get_field(_)) for _ in cls.get_ordered_fields_name()]

    def _stored_values(self):
        return tuple(self.__dict__[name] for name, field in self.get_fields() if not field.is_derived())

    def __eq__(self, other):
        if not isinstance(other, Chunk) or other.__class__ != self.__class__:
            return NotImplemented

        return self._stored_values() == other._stored_values()

    def __hash__(self):
        return hash((self.__class__, self._stored_values()))

    def __repr__(self):
        msg = []
        for field_name, _ in self.get_fields():
            msg.append('%s=%r' % (field_name, getattr(self, field_name)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    @property
    def raw(self) -> bytes:
        return self.pack()

    @property
    def size(self) -> int:
        return len(self.raw)

    def pack(self) -> bytes:
        '''Encode the instance, field after field.'''
        value = b''
        for field_name, field in self.get_fields():
            value += field.pack(getattr(self, field_name))

        return value

    @classmethod
    def from_fields(cls, **values):
        '''Build an instance bypassing any constructor defined by subclasses.'''
        instance = cls.__new__(cls)
        Chunk.__init__(instance, **values)

        return instance

    @classmethod
    def unpack(cls, stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class.

        The fields are read in order, a field can depend on the ones preceding it.
        Once all of them are read, the values found for the derived fields are checked
        against the ones computed from the instance: it's not possible to build
        an instance with stale values.
        '''
        values = {}
        for field_name, field in cls.get_fields():
            logger.debug('unpacking %s.%s' % (cls.__name__, field_name))
            try:
                values[field_name] = field.unpack(stream, values)
            except PNGMsgException as e:
                e.chain.insert(0, field_name)
                raise

        instance = cls.from_fields(**{
            field_name: values[field_name] for field_name, field in cls.get_fields() if not field.is_derived()
        })

        instance.validate(values)

        return instance

    def validate(self, values):
        for field_name, field in self.get_fields():
            if not field.is_derived():
                continue

            derived = getattr(self, field_name)

            if values[field_name] != derived:
                exc = field.mismatch(values[field_name], derived)
                exc.chain.insert(0, field_name)
                raise exc
