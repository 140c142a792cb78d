import io
import msgspec
import socket

from sambridge import cli


def arguments(router, *rest):
    return ['--address', '127.0.0.1', '--port', str(router.port), '--handshake-timeout', '1'] + list(rest)


def test_lookup(router, capsys):

    router.replies['NAMING LOOKUP NAME=example.i2p'] = 'NAMING REPLY RESULT=OK VALUE=xyz'

    status = cli.main(arguments(router, 'lookup', 'example.i2p'))
    captured = capsys.readouterr()

    assert status == 0
    assert captured.out == 'xyz\n'


def test_lookup_not_found(router, capsys):

    router.replies['NAMING LOOKUP NAME=missing.i2p'] = 'NAMING REPLY RESULT=KEY_NOT_FOUND'

    status = cli.main(arguments(router, 'lookup', 'missing.i2p'))
    captured = capsys.readouterr()

    assert status == 1
    assert captured.out == ''
    assert 'not found' in captured.err


def test_lookup_failure(router, capsys):

    router.replies['NAMING LOOKUP NAME=bad.i2p'] = 'NAMING REPLY RESULT=BADTAG'

    status = cli.main(arguments(router, 'lookup', 'bad.i2p'))
    captured = capsys.readouterr()

    assert status == 2
    assert 'BADTAG' in captured.err


def test_generate(router, capsys):

    router.replies['DEST GENERATE'] = 'DEST REPLY PUB=abc PRIV=def'

    status = cli.main(arguments(router, 'generate'))
    captured = capsys.readouterr()

    assert status == 0
    assert msgspec.json.decode(captured.out) == {'public': 'abc', 'private': 'def'}


def test_unreachable(capsys):

    unused = socket.socket()
    unused.bind(('127.0.0.1', 0))
    port = unused.getsockname()[1]
    unused.close()

    status = cli.main(['--port', str(port), '--address', '127.0.0.1', 'generate'])
    captured = capsys.readouterr()

    assert status == 2
    assert captured.err.startswith('sambridge: ')


def test_lookup_unencodable_name(router, capsys):

    # An empty label cannot be converted to punycode.

    status = cli.main(arguments(router, 'lookup', '\u00fc..i2p'))
    captured = capsys.readouterr()

    assert status == 2
    assert captured.out == ''
    assert captured.err.startswith('sambridge: ')
    assert router.received == ['HELLO VERSION MIN=3.0 MAX=3.0']


def test_datagram(tmp_path, monkeypatch):

    listener = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    listener.bind(('127.0.0.1', 0))
    listener.settimeout(2)
    port = listener.getsockname()[1]

    payload = tmp_path / 'payload'
    payload.write_bytes(b'hello\x00world')

    status = cli.main(['--address', '127.0.0.1', '--udp-port', str(port), 'datagram', 'session1', 'abc', str(payload)])
    received, address = listener.recvfrom(65536)

    assert status == 0
    assert received == b'3.0 session1 abc\nhello\x00world'

    stdin = io.TextIOWrapper(io.BytesIO(b'from stdin'))
    monkeypatch.setattr('sys.stdin', stdin)

    status = cli.main(['--address', '127.0.0.1', '--udp-port', str(port), 'datagram', 'session1', 'abc'])
    received, address = listener.recvfrom(65536)

    assert status == 0
    assert received == b'3.0 session1 abc\nfrom stdin'

    listener.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
