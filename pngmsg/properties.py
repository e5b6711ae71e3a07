import logging
from collections.abc import Mapping


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Chunk):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the length of the string contained in the field named 'data'
    strictly connected to the value of the field named 'length'.

    The expression is resolved with respect to a "source": while unpacking it is
    the mapping of the values read so far, otherwise it is the chunk instance.
    The syntax is inspired from module resolution: a leading '.' indicates a field
    at the same level, the following components are attributes of the previous one.
    '''
    def __init__(self, expression):
        self.expression = expression
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def resolve_field(self, source):
        # '.length'.split(".") -> ['', 'length']
        # 'length'.split(".") -> ['length']
        fields_path = self.expression.split('.')
        if fields_path[0] == '':
            fields_path = fields_path[1:]

        name, *components = fields_path

        value = source[name] if isinstance(source, Mapping) else getattr(source, name)

        for component_name in components:
            value = getattr(value, component_name)

        return value

    def resolve(self, source):
        '''With this method we resolve the attribute with respect to the source
        passed as argument.'''
        value = self.resolve_field(source)

        self.logger.debug(' resolved \'%s\' with value %r' % (self.expression, value))

        return value


class LengthOf(Dependency):
    """Resolve as the length of the referenced value, that can't be
    greater than "maximum" when indicated."""

    def __init__(self, expression, maximum=None):
        super().__init__(expression)
        self.maximum = maximum

    def resolve(self, source):
        length = len(super().resolve(source))

        if self.maximum is not None and length > self.maximum:
            raise ValueError(f"length of '{self.expression}' is {length}, the maximum is {self.maximum}")

        return length
