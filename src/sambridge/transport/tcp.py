""" TCP line transport for the SAM control channel. Lines are ASCII and
    terminated by a single newline. Reads are bounded by a deadline: the
    socket timeout is set to whatever time remains before the deadline, so
    a read blocks exactly as long as it is allowed to and no longer.
"""

from __future__ import annotations

import logging
import socket
import time
from typing import Optional

from ..errors import GrammarError, SamTimeout, TransportConnectionError
from .base import Transport

logger = logging.getLogger(__name__)


class LineReader:
    """ Accumulate bytes from a connected *sock* and hand them back one
        line at a time. Bytes received beyond the end of a line are kept
        for the next call to :func:`read_line`.
    """

    chunk = 4096

    def __init__(self, sock: socket.socket):
        self.socket = sock
        self.buffer = bytearray()


    def read_line(self, timeout: float) -> str:

        deadline = time.monotonic() + timeout

        while True:
            index = self.buffer.find(b'\n')
            if index >= 0:
                line = bytes(self.buffer[:index])
                del self.buffer[:index + 1]
                break

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise SamTimeout('no response received in %.3f sec' % (timeout))

            self.socket.settimeout(remaining)

            try:
                received = self.socket.recv(self.chunk)
            except socket.timeout:
                raise SamTimeout('no response received in %.3f sec' % (timeout))

            if received == b'':
                raise TransportConnectionError('connection closed by the SAM bridge')

            self.buffer.extend(received)

        line = line.rstrip(b'\r')

        try:
            return line.decode('ascii')
        except UnicodeDecodeError:
            raise GrammarError('message is not ASCII: ' + repr(line))


# end of class LineReader



class LineWriter:
    """ Write ASCII lines to a connected *sock*. Every line is sent in its
        entirety before :func:`write_line` returns.
    """

    terminator = b'\n'

    def __init__(self, sock: socket.socket):
        self.socket = sock


    def write_line(self, line: str) -> None:

        try:
            encoded = line.encode('ascii')
        except UnicodeEncodeError:
            raise GrammarError('message is not ASCII: ' + repr(line))

        self.socket.settimeout(None)
        self.socket.sendall(encoded + self.terminator)


# end of class LineWriter



class TcpTransport(Transport):
    """ A persistent TCP connection to a SAM bridge at *address* and *port*.
        The connection is established by :func:`open`, and released by
        :func:`close`; the reader, writer, and socket are released in that
        order.
    """

    connect_timeout = 5.0

    def __init__(self, address: str, port: int):
        self.address = address
        self.port = int(port)

        self.socket: Optional[socket.socket] = None
        self.reader: Optional[LineReader] = None
        self.writer: Optional[LineWriter] = None


    def __repr__(self):
        return 'TcpTransport(%r, %d)' % (self.address, self.port)


    @property
    def is_open(self) -> bool:
        return self.socket is not None


    def open(self) -> None:

        server = (self.address, self.port)

        try:
            sock = socket.create_connection(server, timeout=self.connect_timeout)
        except OSError as exc:
            raise TransportConnectionError(
                f"cannot connect to SAM bridge at {self.address}:{self.port}: {exc}"
            ) from exc

        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)

        self.socket = sock
        self.writer = LineWriter(sock)
        self.reader = LineReader(sock)

        logger.debug("connected to %s:%d", self.address, self.port)


    def close(self) -> None:

        self.reader = None
        self.writer = None

        sock = self.socket
        self.socket = None

        if sock is not None:
            try:
                sock.shutdown(socket.SHUT_RDWR)
            except OSError:
                # Already disconnected by the remote side.
                pass
            sock.close()
            logger.debug("closed connection to %s:%d", self.address, self.port)


    def write_line(self, line: str) -> None:

        if self.writer is None:
            raise TransportConnectionError('transport is not open')

        try:
            self.writer.write_line(line)
        except OSError as exc:
            raise TransportConnectionError(f"write to {self.address}:{self.port} failed: {exc}") from exc


    def read_line(self, timeout: float) -> str:

        if self.reader is None:
            raise TransportConnectionError('transport is not open')

        try:
            return self.reader.read_line(timeout)
        except (SamTimeout, TransportConnectionError):
            raise
        except OSError as exc:
            raise TransportConnectionError(f"read from {self.address}:{self.port} failed: {exc}") from exc


# end of class TcpTransport


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
