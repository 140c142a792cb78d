""" The :class:`KeyPair` returned by a DEST GENERATE request. """

import msgspec


class KeyPair(msgspec.Struct, frozen=True):
    """ An I2P destination key pair, as returned by the router. Both keys
        are the router's I2P base64 strings, kept verbatim.

        The *public* key is the destination itself, and is safe to share.
        The *private* key must be treated as a secret; it is masked in the
        :func:`repr` so that it does not leak into log output, but it is
        included when the pair is encoded with :func:`encode`.
    """

    public: str
    private: str

    def __repr__(self):
        return 'KeyPair(public=%r, private=<%d characters>)' % (self.public, len(self.private))


def encode(pair):
    """ Return the JSON encoding of a :class:`KeyPair` as bytes. """

    return msgspec.json.encode(pair)


def decode(encoded):
    """ Return the :class:`KeyPair` encoded in the JSON *encoded* bytes. A
        malformed document raises :class:`msgspec.ValidationError` or
        :class:`msgspec.DecodeError`.
    """

    return msgspec.json.decode(encoded, type=KeyPair)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
