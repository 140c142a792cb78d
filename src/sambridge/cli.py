""" Command-line access to a SAM bridge:

    sambridge lookup NAME
        Print the base64 destination for NAME.

    sambridge generate
        Generate a new destination and print it, as JSON.

    sambridge datagram SESSION TARGET [FILE]
        Send the contents of FILE (or standard input) as one datagram.
"""

import argparse
import logging
import sys

from . import config
from . import keys
from .errors import SamError
from .session import Session
from .transport import datagram


def _lookup(arguments):

    with _session(arguments) as session:
        destination = session.lookup(arguments.name, arguments.timeout)

    if destination is None:
        print('%s: name not found' % (arguments.name), file=sys.stderr)
        return 1

    print(destination)
    return 0


def _generate(arguments):

    with _session(arguments) as session:
        pair = session.generate_key_pair(arguments.timeout)

    sys.stdout.write(keys.encode(pair).decode('utf-8') + '\n')
    return 0


def _datagram(arguments):

    if arguments.file is None:
        payload = sys.stdin.buffer.read()
    else:
        with open(arguments.file, 'rb') as source:
            payload = source.read()

    datagram.send(arguments.address, arguments.udp_port, arguments.session, arguments.target, payload)
    return 0


def _session(arguments):
    return Session(arguments.address, arguments.port, arguments.handshake_timeout)


def parser():
    """ Return the :class:`argparse.ArgumentParser` for :func:`main`. """

    parser = argparse.ArgumentParser(prog='sambridge', description='Talk to the SAM bridge of an I2P router.')
    parser.add_argument('-a', '--address', default=config.address,
                        help='SAM bridge address (default: %(default)s)')
    parser.add_argument('-p', '--port', type=int, default=config.port,
                        help='SAM control port (default: %(default)s)')
    parser.add_argument('--udp-port', type=int, default=config.datagram_port,
                        help='SAM datagram port (default: %(default)s)')
    parser.add_argument('-t', '--timeout', type=float, default=config.timeout,
                        help='seconds to wait for a reply (default: %(default)s)')
    parser.add_argument('--handshake-timeout', type=float, default=config.handshake_timeout,
                        help='seconds to wait for the handshake (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log every line exchanged with the bridge')

    commands = parser.add_subparsers(dest='command', required=True)

    lookup = commands.add_parser('lookup', help='resolve a host name to a destination')
    lookup.add_argument('name')
    lookup.set_defaults(handler=_lookup)

    generate = commands.add_parser('generate', help='generate a new destination')
    generate.set_defaults(handler=_generate)

    send = commands.add_parser('datagram', help='send a single datagram')
    send.add_argument('session', help='SAM session id')
    send.add_argument('target', help='destination to send to')
    send.add_argument('file', nargs='?', default=None,
                      help='payload file (default: standard input)')
    send.set_defaults(handler=_datagram)

    return parser


def main(argv=None):
    """ Entry point for the ``sambridge`` console script. Returns the exit
        status.
    """

    arguments = parser().parse_args(argv)

    if arguments.verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    try:
        return arguments.handler(arguments)
    except (SamError, OSError, ValueError) as error:
        print('sambridge: %s' % (error), file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
