""" Default settings for a :mod:`sambridge` client. Every default can be
    overridden with an environment variable, which is read once at import
    time; explicit arguments passed to :class:`sambridge.Session` and
    :func:`sambridge.transport.datagram.send` always take precedence.

    =========================  ===========  ================================
    Variable                   Default      Meaning
    =========================  ===========  ================================
    ``SAM_ADDRESS``            127.0.0.1    SAM bridge host
    ``SAM_PORT``               7656         SAM control (TCP) port
    ``SAM_DATAGRAM_PORT``      7655         SAM datagram (UDP) port
    ``SAM_HANDSHAKE_TIMEOUT``  0.05         seconds to wait for HELLO REPLY
    ``SAM_TIMEOUT``            0.25         seconds to wait for other replies
    =========================  ===========  ================================
"""

import os


def _read(variable, default, cast):
    """ Return the environment variable *variable* converted with *cast*,
        or *default* if it is not set.
    """

    try:
        value = os.environ[variable]
    except KeyError:
        return default

    try:
        value = cast(value)
    except ValueError:
        raise ValueError('invalid value for %s: %r' % (variable, value))

    if cast is not str and value <= 0:
        raise ValueError('%s must be positive, not %r' % (variable, value))

    return value


address = _read('SAM_ADDRESS', '127.0.0.1', str)
port = _read('SAM_PORT', 7656, int)
datagram_port = _read('SAM_DATAGRAM_PORT', 7655, int)

# The handshake is expected to be answered immediately by a local router;
# the other requests involve a little more work on the router side.

handshake_timeout = _read('SAM_HANDSHAKE_TIMEOUT', 0.05, float)
timeout = _read('SAM_TIMEOUT', 0.25, float)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
