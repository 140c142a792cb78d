""" Python client for the SAM v3 bridge of an I2P router. This includes
    the control message codec, the :class:`Session` that owns a control
    connection, the naming and key generation requests built on it, and
    a sender for one-shot datagrams.
"""

# Utility components.

from . import config
from . import errors
from . import punycode
from . import keys

# Submodules used by multiple other components.

from . import protocol
from . import transport

# Primary public-facing interfaces.

from . import operations
from . import session

from .errors import SamError, GrammarError, InvalidMessage, ProtocolError, SamTimeout, StateError
from .keys import KeyPair
from .protocol.message import Message
from .session import Session, State

send_datagram = transport.datagram.send

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
