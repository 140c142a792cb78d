import msgspec
import pytest

import sambridge
from sambridge import keys


def test_basics():

    pair = keys.KeyPair('public~key', 'private~key')

    assert pair.public == 'public~key'
    assert pair.private == 'private~key'
    assert pair == keys.KeyPair(public='public~key', private='private~key')

    with pytest.raises(AttributeError):
        pair.private = 'something else'


def test_repr():

    pair = keys.KeyPair('public~key', 'private~key')

    assert 'public~key' in repr(pair)
    assert 'private~key' not in repr(pair)


def test_encode():

    pair = keys.KeyPair('public~key', 'private~key')
    encoded = keys.encode(pair)

    assert isinstance(encoded, bytes)
    assert msgspec.json.decode(encoded) == {'public': 'public~key', 'private': 'private~key'}
    assert keys.decode(encoded) == pair


def test_decode_invalid():

    with pytest.raises(msgspec.ValidationError):
        keys.decode(b'{"public": "abc"}')

    with pytest.raises(msgspec.DecodeError):
        keys.decode(b'not json')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
