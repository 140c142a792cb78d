""" Requests built on top of :func:`sambridge.Session.exchange`. Each
    function here builds one request, exchanges it, and checks that the
    response is the one the request calls for before extracting the result.
"""

import logging

from . import config
from . import punycode
from .errors import ProtocolError
from .keys import KeyPair
from .protocol import fields
from .protocol.message import Message

logger = logging.getLogger(__name__)


def _describe(response):
    return '%s %s' % (response.module, response.operation)


def lookup(session, name, timeout=None):
    """ Resolve the host *name* to its base64 destination using the
        connected *session*. Unicode names are converted to their punycode
        form first. Returns None if the bridge does not know the name;
        raises :class:`ProtocolError` for any other failure reported by the
        bridge, or for a malformed reply.
    """

    if timeout is None:
        timeout = config.timeout

    request = Message(fields.NAMING, fields.LOOKUP)
    request[fields.NAME] = punycode.to_ascii(name)

    response = session.exchange(request, timeout)

    if response.validate(fields.NAMING, fields.REPLY, (fields.RESULT,)) == False:
        raise ProtocolError('invalid NAMING LOOKUP reply', 'NAMING REPLY RESULT=...',
                            response.serialize(), response=response)

    result = response[fields.RESULT]

    if result == fields.KEY_NOT_FOUND:
        logger.debug("%s: no such name", name)
        return None

    if result != fields.OK:
        text = 'NAMING LOOKUP %s failed with %s' % (request[fields.NAME], result)

        detail = response.get(fields.MESSAGE)
        if detail is not None:
            text = text + ': ' + detail

        raise ProtocolError(text, result=result, response=response)

    try:
        return response[fields.VALUE]
    except KeyError:
        raise ProtocolError('NAMING REPLY is missing its VALUE', 'VALUE=...',
                            _describe(response), result=result, response=response)


def generate_key_pair(session, timeout=None):
    """ Ask the bridge behind the connected *session* to generate a new
        destination, and return it as a :class:`sambridge.keys.KeyPair`.
    """

    if timeout is None:
        timeout = config.timeout

    request = Message(fields.DEST, fields.GENERATE)
    response = session.exchange(request, timeout)

    if response.validate(fields.DEST, fields.REPLY, (fields.PUB,), (fields.PRIV,)) == False:
        # repr() masks PRIV; serialize() would not.
        raise ProtocolError('invalid DEST GENERATE reply', 'DEST REPLY PUB=... PRIV=...',
                            repr(response), result=response.get(fields.RESULT), response=response)

    return KeyPair(response[fields.PUB], response[fields.PRIV])


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
