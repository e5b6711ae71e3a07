"""
# pngmsg: hide messages into PNG files.

A PNG file is a fixed signature followed by a sequence of chunks; each chunk
has a type, some opaque data and a checksum. Readers skip the ancillary chunks
they don't know about, so a chunk with a private type can carry any data
without making the image unreadable.

The format is described declaratively, as an ordered list of fields

 1. unpack(): read the binary data and build a high-level representation of it;
    each field knows how many bytes it needs, possibly depending on the fields
    preceding it.

 2. pack(): encode the high-level representation into binary data.

Fields like length and checksum are derived from the others, they are never
stored and so they can't disagree with the data they describe.
"""
