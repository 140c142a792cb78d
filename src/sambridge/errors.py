""" Exception classes shared by every layer of :mod:`sambridge`. Everything
    raised deliberately by this package derives from :class:`SamError`, and
    each class also derives from the closest builtin exception so that
    callers not aware of :mod:`sambridge` can still catch them sensibly.
"""


class SamError(Exception):
    """Base class for all sambridge errors."""


class GrammarError(SamError, ValueError):
    """A line on the wire does not follow the SAM message grammar."""


# The original name for the grammar violation; kept as an alias.
InvalidMessage = GrammarError


class ProtocolError(SamError):
    """ A well-formed reply that is not what the request called for: the
        wrong module or operation, a missing argument, or an unexpected
        result code. The *expected* and *observed* attributes describe the
        mismatch; *result* is the RESULT code reported by the router, if
        any; *response* is the offending :class:`Message`, if any.
    """

    def __init__(self, text, expected=None, observed=None, result=None, response=None):

        if expected is not None or observed is not None:
            text = '%s (expected %s, observed %s)' % (text, expected, observed)

        SamError.__init__(self, text)

        self.expected = expected
        self.observed = observed
        self.result = result
        self.response = response


class SamTimeout(SamError, TimeoutError):
    """No complete line arrived from the router before the deadline."""


class StateError(SamError, RuntimeError):
    """ The API was used incorrectly for the current state of an object:
        connecting twice, modifying a parsed message, and so on.
    """


class TransportError(SamError):
    """Base class for errors raised by the socket layer."""


class TransportConnectionError(TransportError, ConnectionError):
    """The connection could not be established, or was closed by the peer."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
