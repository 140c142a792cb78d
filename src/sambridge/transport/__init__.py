"""Transport implementations."""

from .base import Transport
from .tcp import TcpTransport
from . import datagram
