""" One-shot datagrams for the SAM bridge's UDP port. Each call opens a
    UDP socket, sends a single datagram, and closes the socket; there is no
    connection state and no locking. The header line is::

        3.0 <session id> <destination>\\n

    followed immediately by the raw payload bytes, in the same datagram.
"""

import logging
import socket

from ..errors import GrammarError
from ..protocol.fields import PROTOCOL_VERSION

logger = logging.getLogger(__name__)


def header(session_id, target):
    """ Return the header line, as bytes, for a datagram sent on behalf of
        the session *session_id* to the destination *target*.
    """

    for name,value in (('session id', session_id), ('target', target)):
        if value == '' or any(character.isspace() for character in value):
            raise GrammarError('invalid datagram %s: %r' % (name, value))

    line = '%s %s %s\n' % (PROTOCOL_VERSION, session_id, target)

    try:
        return line.encode('ascii')
    except UnicodeEncodeError:
        raise GrammarError('datagram header is not ASCII: ' + repr(line))


def send(address, port, session_id, target, payload):
    """ Send *payload* (bytes) to the destination *target* via the SAM
        bridge listening for datagrams at *address* and *port*, on behalf of
        the SAM session *session_id*. Returns the number of bytes sent,
        header included.
    """

    datagram = header(session_id, target) + bytes(payload)

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect((address, int(port)))
        sent = sock.send(datagram)

    logger.debug("sent %d byte datagram to %s via %s:%d", sent, target, address, int(port))
    return sent


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
