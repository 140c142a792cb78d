""" The :class:`Session` owns the single persistent control connection to a
    SAM bridge: it performs the version handshake, and then carries out
    request/response exchanges one at a time on behalf of any number of
    threads.

    The SAM control protocol has no request identifiers; the bridge simply
    answers the most recent request on the connection. The only way to tie
    a response to the request that produced it is to never allow a second
    request onto the wire until the first one has been answered, which is
    what :func:`Session.exchange` enforces.
"""

import atexit
import enum
import logging
import threading
import weakref

from . import config
from . import operations
from .errors import ProtocolError, SamTimeout, StateError
from .protocol import fields
from .protocol.message import Message, parse
from .transport.tcp import TcpTransport

logger = logging.getLogger(__name__)


class State(enum.Enum):
    """ The life cycle of a :class:`Session`. A session moves from
        UNCONNECTED through HANDSHAKING to READY; a failed handshake leaves
        it BROKEN, still holding its connection. :func:`Session.dispose`
        moves a connected session of any state to DISPOSED.
    """

    UNCONNECTED = 'unconnected'
    HANDSHAKING = 'handshaking'
    READY = 'ready'
    BROKEN = 'broken'
    DISPOSED = 'disposed'


class Session:
    """ A control connection to the SAM bridge at *address* and *port*; the
        defaults are taken from :mod:`sambridge.config`. The connection is
        not established until :func:`connect` is called, and is released by
        :func:`dispose`. A :class:`Session` is also a context manager::

            with sambridge.Session() as session:
                destination = session.lookup('example.i2p')

        The *handshake_timeout* is the number of seconds to wait for the
        reply to the HELLO handshake. A *transport* instance other than the
        default :class:`sambridge.transport.tcp.TcpTransport` may be
        supplied; it will be opened by :func:`connect` and closed by
        :func:`dispose`.

        :ivar state: The current :class:`State` of this session.
    """

    def __init__(self, address=None, port=None, handshake_timeout=None, transport=None):

        if address is None:
            address = config.address
        if port is None:
            port = config.port
        if handshake_timeout is None:
            handshake_timeout = config.handshake_timeout

        self.address = address
        self.port = int(port)
        self.handshake_timeout = handshake_timeout
        self.state = State.UNCONNECTED
        self.transport = None

        self._supplied_transport = transport

        # The lock is held for the duration of an exchange: the request is
        # written, and the response is read, before any other thread can
        # touch the connection. It is reentrant so that read_line() can be
        # called both on its own and from within an exchange.

        self._lock = threading.RLock()


    def __enter__(self):

        try:
            self.connect()
        except Exception:
            self.dispose()
            raise

        return self


    def __exit__(self, exc_type, exc_value, traceback):
        self.dispose()


    def __repr__(self):
        return '<Session %s:%d %s>' % (self.address, self.port, self.state.value)


    @property
    def connected(self):
        """ True if this session holds a transport that reports itself open,
            regardless of whether the handshake succeeded.
        """

        return self.transport is not None and self.transport.is_open


    def connect(self):
        """ Connect to the SAM bridge and perform the handshake. Raises
            :class:`StateError` if this session is already connected, and
            :class:`ProtocolError` if the bridge does not agree to speak
            protocol version 3.0.

            A failed handshake leaves the session BROKEN but connected; the
            caller is responsible for calling :func:`dispose`.
        """

        with self._lock:
            if self.transport is not None:
                raise StateError('cannot connect an already connected session; dispose of it first: ' + repr(self))

            transport = self._supplied_transport
            if transport is None:
                transport = TcpTransport(self.address, self.port)

            transport.open()

            self.transport = transport
            self.state = State.HANDSHAKING
            _sessions.add(self)

            logger.info("connected to SAM bridge at %s:%d", self.address, self.port)

            try:
                self._handshake()
            except Exception:
                self.state = State.BROKEN
                raise

            self.state = State.READY


    def _handshake(self):

        request = Message(fields.HELLO, fields.VERSION)
        request[fields.MIN] = fields.PROTOCOL_VERSION
        request[fields.MAX] = fields.PROTOCOL_VERSION

        try:
            response = self._exchange(request, self.handshake_timeout)
        except SamTimeout:
            logger.warning("no handshake reply from %s:%d in %.3f sec", self.address, self.port, self.handshake_timeout)
            raise

        ok = response.validate(fields.HELLO, fields.REPLY,
                               (fields.RESULT, fields.OK),
                               (fields.VERSION, fields.PROTOCOL_VERSION))

        if ok == False:
            expected = 'HELLO REPLY RESULT=OK VERSION=' + fields.PROTOCOL_VERSION
            observed = response.serialize()
            logger.warning("handshake with %s:%d failed: %s", self.address, self.port, observed)
            raise ProtocolError('handshake failed', expected, observed,
                                result=response.get(fields.RESULT), response=response)


    def exchange(self, request, timeout=None):
        """ Send the :class:`Message` *request* and return the response
            :class:`Message`, waiting at most *timeout* seconds for it to
            arrive (the default is :data:`sambridge.config.timeout`).

            Concurrent calls are serialized: each request is written and its
            response read before the next request is written.

            A :class:`SamTimeout` does not close the connection. A late
            response may still arrive and be mistaken for the answer to the
            next request, so a session that has timed out should be disposed
            of and replaced.
        """

        if timeout is None:
            timeout = config.timeout

        with self._lock:
            if self.state != State.READY:
                raise StateError('session is not ready for requests: ' + repr(self))

            return self._exchange(request, timeout)


    def _exchange(self, request, timeout):
        """ The body of :func:`exchange`; the caller must hold the lock. """

        line = request.serialize()

        logger.debug("-> %r", request)
        self.transport.write_line(line)

        try:
            response = self.read_message(timeout)
        except SamTimeout:
            logger.warning("%s %s: no response in %.3f sec; the session is no longer reliable", request.module, request.operation, timeout)
            raise

        logger.debug("<- %r", response)
        return response


    def read_line(self, timeout):
        """ Return the next line from the bridge, without its terminator.
            Raises :class:`SamTimeout` if no complete line arrives within
            *timeout* seconds.
        """

        with self._lock:
            if self.transport is None:
                raise StateError('session is not connected: ' + repr(self))

            return self.transport.read_line(timeout)


    def read_message(self, timeout):
        """ Same as :func:`read_line`, but return the parsed :class:`Message`.
        """

        return parse(self.read_line(timeout))


    def dispose(self):
        """ Release the connection, if any. Calling :func:`dispose` on a
            session that is not connected does nothing.
        """

        with self._lock:
            transport = self.transport
            if transport is None:
                return

            self.transport = None
            self.state = State.DISPOSED
            _sessions.discard(self)

            transport.close()

        logger.info("disconnected from SAM bridge at %s:%d", self.address, self.port)


    def lookup(self, name, timeout=None):
        """ See :func:`sambridge.operations.lookup`. """

        return operations.lookup(self, name, timeout)


    def generate_key_pair(self, timeout=None):
        """ See :func:`sambridge.operations.generate_key_pair`. """

        return operations.generate_key_pair(self, timeout)


# end of class Session



_sessions = weakref.WeakSet()


def shutdown():
    """ Dispose of every session that is still connected. This is invoked
        automatically when the interpreter exits.
    """

    for session in list(_sessions):
        session.dispose()


atexit.register(shutdown)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
