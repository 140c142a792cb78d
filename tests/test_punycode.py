import pytest

from sambridge import punycode


def test_ascii_unchanged():

    assert punycode.to_ascii('example.i2p') == 'example.i2p'
    assert punycode.to_unicode('example.i2p') == 'example.i2p'


def test_to_ascii():

    assert punycode.to_ascii('bücher.i2p') == 'xn--bcher-kva.i2p'
    assert punycode.to_ascii('München.i2p') == 'xn--mnchen-3ya.i2p'


def test_to_unicode():

    assert punycode.to_unicode('xn--bcher-kva.i2p') == 'bücher.i2p'
    assert punycode.to_unicode('bücher.i2p') == 'bücher.i2p'


def test_emoji():

    name = '\U0001f63a\U0001f63a\U0001f63a.i2p'
    encoded = punycode.to_ascii(name)

    assert encoded.startswith('xn--')
    assert encoded.endswith('.i2p')
    assert encoded.isascii()
    assert punycode.to_unicode(encoded) == name


def test_invalid():

    with pytest.raises(UnicodeError):
        punycode.to_ascii('ü' * 70 + '.i2p')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
