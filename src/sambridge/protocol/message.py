""" A class representation of a SAM control message, and the routines that
    translate between :class:`Message` instances and lines on the wire.

    A SAM message is a single ASCII line of space-separated tokens::

        MODULE OPERATION KEY1=VALUE1 KEY2=VALUE2 ...

    The first two bare tokens (tokens without an equals sign) are the
    module and the operation; every other token is a key/value argument.
"""

from ..errors import GrammarError, StateError


class Message:
    """ The :class:`Message` is the unit of correspondence with a SAM
        bridge. A :class:`Message` built directly by the caller is mutable:
        arguments are set with item assignment, and the message is then
        serialized with :func:`serialize` (or :func:`str`) and sent. A
        :class:`Message` returned by :func:`parse` came off the wire and is
        immutable for its entire lifetime.

        The *module* and *operation* are normalized to upper case, as are
        argument keys; argument lookups are therefore case-insensitive.
        Argument values are kept verbatim. Any additional keyword arguments
        are set as message arguments, in the order given::

            request = Message('naming', 'lookup', name='example.i2p')

        :ivar module: The first bare token, upper case; None if absent.
        :ivar operation: The second bare token, upper case; None if absent.
        :ivar secret: A set of argument keys whose values are masked in
                      the :func:`repr` of any message.
    """

    secret = set(('PRIV',))

    def __init__(self, module, operation, **arguments):

        self.module = _bare_token('module', module).upper()
        self.operation = _bare_token('operation', operation).upper()
        self._arguments = dict()
        self._mutable = True

        for key,value in arguments.items():
            self[key] = value


    @classmethod
    def _from_wire(cls, module, operation, arguments):
        """ Construct an immutable :class:`Message` without any of the
            checks applied to caller-built messages. Only :func:`parse`
            should need this.
        """

        message = cls.__new__(cls)
        message.module = module
        message.operation = operation
        message._arguments = arguments
        message._mutable = False
        return message


    def __contains__(self, key):
        return key.upper() in self._arguments


    def __getitem__(self, key):
        return self._arguments[key.upper()]


    def __setitem__(self, key, value):

        if self._mutable == False:
            raise StateError('cannot modify a parsed message: ' + repr(self))

        key = _bare_token('argument key', key)
        value = str(value)

        if '\n' in value or '\r' in value:
            raise GrammarError('argument values cannot span lines: %s=%r' % (key, value))

        self._arguments[key.upper()] = value


    def __iter__(self):
        return iter(self._arguments)


    def __len__(self):
        return len(self._arguments)


    def __repr__(self):

        arguments = list()
        for key,value in self._arguments.items():
            if key in self.secret:
                value = '<secret>'
            arguments.append('%s=%s' % (key, value))

        base = '%s %s' % (self.module, self.operation)
        if arguments:
            base = base + ' ' + ' '.join(arguments)

        return '<Message %s>' % (base)


    def __str__(self):
        return self.serialize()


    @property
    def mutable(self):
        """ True if the message was built locally, False if it was parsed
            from the wire.
        """

        return self._mutable


    def get(self, key, default=None):
        """ Return the value for argument *key*, or *default* if the message
            does not carry that argument.
        """

        return self._arguments.get(key.upper(), default)


    def items(self):
        """ Return the (key, value) pairs of the message arguments, in the
            order they were set.
        """

        return self._arguments.items()


    def serialize(self):
        """ Return the wire representation of this message, without the
            trailing newline. Arguments appear in the order in which they
            were set; the receiving bridge is not guaranteed to accept any
            other ordering. A value containing a space is wrapped in double
            quotes, but is otherwise not escaped.
        """

        module = self.module
        operation = self.operation

        if module is None:
            module = '<null>'
        if operation is None:
            operation = '<null>'

        tokens = [module, operation]

        for key,value in self._arguments.items():
            if ' ' in value:
                value = '"' + value + '"'
            tokens.append(key + '=' + value)

        return ' '.join(tokens)


    def validate(self, module, operation, *criteria):
        """ Return True if this message has the given *module* and
            *operation*, and satisfies every one of the *criteria*; return
            False otherwise. The module and operation comparisons are
            case-insensitive.

            Each criterion is a sequence of one or two strings. A single
            key, ``('RESULT',)``, requires only that the argument is present.
            A key and a value, ``('RESULT', 'OK')``, requires that the
            argument is present and its value is exactly the one given;
            value comparisons are case-sensitive.

            A criterion of any other length is a programming error, and
            raises :class:`StateError` rather than returning False.
        """

        for criterion in criteria:
            if len(criterion) != 1 and len(criterion) != 2:
                raise StateError('validation criteria must have one or two elements, not ' + repr(criterion))

        if self.module is None or self.module != module.upper():
            return False

        if self.operation is None or self.operation != operation.upper():
            return False

        for criterion in criteria:
            try:
                value = self[criterion[0]]
            except KeyError:
                return False

            if len(criterion) == 2 and value != criterion[1]:
                return False

        return True


# end of class Message



def _bare_token(kind, token):
    """ Return *token* as a string if it can stand alone on the wire as a
        module, operation, or argument key; raise :class:`GrammarError`
        otherwise.
    """

    token = str(token)

    if token == '':
        raise GrammarError('empty ' + kind)

    for character in ' =\r\n':
        if character in token:
            raise GrammarError('invalid %s: %r' % (kind, token))

    return token



def parse(line):
    """ Parse a single *line* received from a SAM bridge and return an
        immutable :class:`Message`. The line may include its trailing
        newline. Tokens are separated by spaces; empty tokens, as would
        occur with repeated or trailing spaces, are ignored.

        A token containing an equals sign is an argument, split at the first
        equals sign, so a value may itself contain equals signs. Any other
        token is a bare token: the first is the module, the second is the
        operation, and a third raises :class:`GrammarError`. A line with no
        bare tokens at all yields a :class:`Message` whose module and
        operation are None; it is up to :func:`Message.validate` to reject
        such a message.

        Double quotes are not interpreted: a quoted value containing a space
        will be split into separate tokens.
    """

    if isinstance(line, bytes):
        try:
            line = line.decode('ascii')
        except UnicodeDecodeError:
            raise GrammarError('message is not ASCII: ' + repr(line))

    line = line.rstrip('\r\n')

    module = None
    operation = None
    arguments = dict()

    for token in line.split(' '):
        if token == '':
            continue

        if '=' in token:
            key, value = token.split('=', 1)
            arguments[key.upper()] = value
        elif module is None:
            module = token.upper()
        elif operation is None:
            operation = token.upper()
        else:
            raise GrammarError('the message contains more than two base tokens: ' + repr(line))

    return Message._from_wire(module, operation, arguments)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
