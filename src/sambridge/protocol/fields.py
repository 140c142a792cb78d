"""Protocol vocabulary.

Every module, operation, argument and result name used by this package,
kept in one place so that a typo is an AttributeError rather than a
silently mismatched reply.
"""

# The one SAM protocol version this client negotiates.
PROTOCOL_VERSION = "3.0"

# Modules.
HELLO = "HELLO"
NAMING = "NAMING"
DEST = "DEST"

# Operations. VERSION is also an argument of HELLO REPLY.
VERSION = "VERSION"
REPLY = "REPLY"
LOOKUP = "LOOKUP"
GENERATE = "GENERATE"

# Argument keys.
MIN = "MIN"
MAX = "MAX"
NAME = "NAME"
RESULT = "RESULT"
VALUE = "VALUE"
MESSAGE = "MESSAGE"
PUB = "PUB"
PRIV = "PRIV"

# Result codes.
OK = "OK"
KEY_NOT_FOUND = "KEY_NOT_FOUND"
