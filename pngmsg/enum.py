from enum import Flag


class ChunkTypeFlag(Flag):
    '''The property bits encoded by the case of each letter of a chunk type:
    a flag is present when the respective letter is lowercase.'''
    NONE         = 0
    ANCILLARY    = 1 << 0
    PRIVATE      = 1 << 1
    RESERVED     = 1 << 2
    SAFE_TO_COPY = 1 << 3
