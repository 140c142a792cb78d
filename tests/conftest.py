import pytest
import socket
import threading

import sambridge


HELLO = 'HELLO VERSION MIN=3.0 MAX=3.0'
HELLO_OK = 'HELLO REPLY RESULT=OK VERSION=3.0'


class FakeRouter:
    """ A stand-in for the SAM bridge of an I2P router, listening on an
        ephemeral port on the loopback interface. Every line received is
        recorded in :ivar:`received`; a line with an entry in
        :ivar:`replies` is answered with that entry, anything else is met
        with silence. A reply may also be a callable, invoked with the
        received line, returning the reply line or None.
    """

    def __init__(self):

        self.replies = dict()
        self.replies[HELLO] = HELLO_OK
        self.received = list()
        self.connections = list()
        self.shutdown = False

        self.socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.socket.bind(('127.0.0.1', 0))
        self.socket.listen(8)
        self.socket.settimeout(0.05)

        self.port = self.socket.getsockname()[1]

        self.thread = threading.Thread(target=self.run)
        self.thread.daemon = True
        self.thread.start()


    def cleanup(self):

        self.shutdown = True
        self.thread.join(1)
        self.socket.close()

        for connection in self.connections:
            try:
                connection.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
            connection.close()


    def run(self):

        while self.shutdown == False:
            try:
                connection, address = self.socket.accept()
            except socket.timeout:
                continue
            except OSError:
                break

            connection.settimeout(None)
            self.connections.append(connection)

            thread = threading.Thread(target=self.serve, args=(connection,))
            thread.daemon = True
            thread.start()


    def serve(self, connection):

        reader = connection.makefile('rb')

        while True:
            try:
                raw = reader.readline()
            except OSError:
                break

            if raw == b'':
                break

            line = raw.decode('ascii').rstrip('\n')
            self.received.append(line)

            reply = self.replies.get(line)
            if callable(reply):
                reply = reply(line)

            if reply is None:
                continue

            try:
                connection.sendall(reply.encode('ascii') + b'\n')
            except OSError:
                break

        reader.close()


# end of class FakeRouter



@pytest.fixture
def router():

    router = FakeRouter()
    yield router
    router.cleanup()


@pytest.fixture
def session(router):

    session = sambridge.Session('127.0.0.1', router.port, handshake_timeout=1.0)
    session.connect()

    yield session

    session.dispose()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
