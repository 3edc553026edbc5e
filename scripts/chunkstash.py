#!/usr/bin/env python3
'''
Hide messages inside PNG files.

 $ chunkstash.py encode image.png ruSt 'hello'
 $ chunkstash.py decode image.png ruSt
 decoded message: hello
'''
import logging
import os
import sys

from pngstash import commands
from pngstash.exceptions import PNGStashException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <command> <png file path> [arguments]

commands:
  encode <png file path> <chunk type> <message>   encode the message into a new chunk
  decode <png file path> <chunk type>             print the message of the first chunk with the type
  remove <png file path> <chunk type>             remove the first chunk with the type
  print  <png file path>                          print all the chunks''')
    sys.exit(1)


def run(command, args):
    if command == 'encode' and len(args) == 3:
        commands.encode(*args)
        print('message encoded')
    elif command == 'decode' and len(args) == 2:
        print(f'decoded message: {commands.decode(*args)}')
    elif command == 'remove' and len(args) == 2:
        commands.remove(*args)
        print('chunk removed')
    elif command == 'print' and len(args) == 1:
        print(commands.print_chunks(*args), end='')
    else:
        return False

    return True


if __name__ == '__main__':
    if len(sys.argv) < 3:
        usage(sys.argv[0])

    try:
        if not run(sys.argv[1], sys.argv[2:]):
            usage(sys.argv[0])
    except (PNGStashException, OSError) as e:
        print(f'error: {e}', file=sys.stderr)
        sys.exit(1)
