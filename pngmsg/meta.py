import logging
from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class FieldDescriptor(object):
    """Read-only wrapper around field access of a Chunk instance.

    Derived fields are recomputed from the instance at each access, the others
    are read from the instance's dictionary."""

    def __init__(self, field_instance: "Field", field_name: str):
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, owner=None):
        # accessing from the class gives back the field definition
        if instance is None:
            return self.field

        if self.field.is_derived():
            return self.field.derive(instance)

        return instance.__dict__[self.field.name]

    def __set__(self, instance, value):
        raise AttributeError(f"field '{self.field.name}' of {instance.__class__.__name__} is read-only")


class FieldBase(object):

    def contribute_to_chunk(self, cls, name):
        if name not in cls.__dict__:
            setattr(cls, name, FieldDescriptor(self, name))
        else:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')


class Meta(object):
    """Class containing metadata about the abstraction"""

    def __init__(self):
        self.fields = []
        self._fields_map = {}

    def add_field(self, name, field):
        self.fields.append(name)
        self._fields_map[name] = field

    def get_field(self, name):
        return self._fields_map[name]


class MetaChunk(type):

    def __new__(cls, names, bases, attrs):
        '''All of this is a big hack, maybe too inspired by how Django does a similar thing!'''
        module = attrs.pop('__module__')
        classcell = attrs.pop('__classcell__', None)

        new_attrs = {
            '__module__': module,
        }
        if classcell is not None:
            new_attrs['__classcell__'] = classcell
        new_cls = super(MetaChunk, cls).__new__(cls, names, bases, new_attrs)

        new_cls._meta = Meta()

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaChunk)]
        for parent in parents:
            for obj_name in parent._meta.fields:
                field = parent._meta.get_field(obj_name)
                setattr(new_cls, obj_name, parent.__dict__[obj_name])
                new_cls._meta.add_field(obj_name, field)

        for obj_name, obj in attrs.items():
            new_cls.add_to_class(obj_name, obj)

        return new_cls

    def add_to_class(cls, name, value):
        if hasattr(value, 'contribute_to_chunk'):
            logging.getLogger(__name__).debug('contribute_to_chunk() found for field \'%s\'' % name)
            value.contribute_to_chunk(cls, name)
            cls._meta.add_field(name, value)
        else:
            setattr(cls, name, value)
