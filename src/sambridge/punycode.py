""" Conversion of I2P host names between their Unicode form and the
    ASCII-compatible (punycode) form used on the wire. The standard library
    ``idna`` codec does the actual work.
"""


def to_ascii(name):
    """ Return the ASCII-compatible encoding of *name*. Names that are
        already plain ASCII are returned unchanged. A name that cannot be
        encoded (an empty label, or a label longer than 63 characters)
        raises :class:`UnicodeError`.
    """

    name = str(name)

    if name.isascii():
        return name

    return name.encode('idna').decode('ascii')


def to_unicode(name):
    """ Return the Unicode form of a possibly punycoded *name*. This is
        the inverse of :func:`to_ascii`.
    """

    name = str(name)

    try:
        encoded = name.encode('ascii')
    except UnicodeEncodeError:
        # Already Unicode.
        return name

    return encoded.decode('idna')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
