""" The SAM control protocol: message vocabulary and the line codec. This
    package knows nothing about sockets; see :mod:`sambridge.transport` and
    :mod:`sambridge.session` for the layers that move messages around.
"""

from . import fields
from . import message

from .message import Message, parse


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
