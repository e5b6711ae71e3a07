import logging
import os
import sys

from . import commands
from .exceptions import PNGMsgException


logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <command> [arguments...]

The available commands are

 encode <png file> <chunk type> <message> [output file]
 decode <png file> <chunk type>
 remove <png file> <chunk type>
 print  <png file>

Set the DEBUG environment variable to have the debug messages.''')
    sys.exit(1)


def do_encode(path, chunk_type, message, output=None):
    commands.encode(path, chunk_type, message, output=output)
    print(f'message saved into \'{output or path}\'')


def do_decode(path, chunk_type):
    print(commands.decode(path, chunk_type))


def do_remove(path, chunk_type):
    chunk = commands.remove(path, chunk_type)
    print(f'removed {chunk}')


def do_print(path):
    print(commands.print_chunks(path))


# command name -> (handler, minimum number of arguments, maximum number of arguments)
COMMANDS = {
    'encode': (do_encode, 3, 4),
    'decode': (do_decode, 2, 2),
    'remove': (do_remove, 2, 2),
    'print':  (do_print, 1, 1),
}


def main(argv=None):
    argv = sys.argv if argv is None else argv

    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    progname = os.path.basename(argv[0]) if argv else 'pngmsg'

    if len(argv) < 2 or argv[1] not in COMMANDS:
        usage(progname)

    handler, n_min, n_max = COMMANDS[argv[1]]
    args = argv[2:]

    if not n_min <= len(args) <= n_max:
        usage(progname)

    try:
        handler(*args)
    except PNGMsgException as e:
        logger.error(f'{argv[1]} failed: {e}')
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
