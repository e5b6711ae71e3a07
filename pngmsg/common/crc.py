'''
We are implementing fields to handle CRC calculation.
'''
from zlib import crc32 as _crc32

from .. import fields
from ..exceptions import ChecksumException


def crc32(data: bytes) -> int:
    return _crc32(data) & 0xffffffff


class CRCField(fields.StructField):
    """standard CRC methods with pre and post conditioning, as defined by ISO 3309 [ISO-3309]
    or ITU-T V.42 [ITU-V42]. The CRC polynomial employed is

      x^32+x^26+x^23+x^22+x^16+x^12+x^11+x^10+x^8+x^7+x^5+x^4+x^2+x+1

    The 32-bit CRC register is initialized to all 1's, and then the data from each byte is processed
    from the least significant bit (1) to the most significant bit (128). After all the data bytes are processed,
    the CRC register is inverted (its ones complement is taken). This value is transmitted (stored in the file)
    MSB first.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.

    The field is always derived: its value is calculated over the raw encoding of the
    sibling fields named in "fields".
    """

    def __init__(self, fields, *args, **kwargs):
        super().__init__('I', *args, **kwargs)
        self.fields = fields

    def is_derived(self) -> bool:
        return True

    def calculate(self, instance) -> int:
        value = b''
        for field_name in self.fields:
            field = instance._meta.get_field(field_name)
            value += field.pack(getattr(instance, field_name))

        return crc32(value)

    def derive(self, instance):
        return self.calculate(instance)

    def mismatch(self, declared, derived) -> ChecksumException:
        return ChecksumException(declared, derived)
