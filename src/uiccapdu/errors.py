"""Errors raised while building command APDUs"""

# Logical channel addressing modes
STANDARD = 'standard'
EXTENDED = 'extended'


class APDUError(ValueError):
    """Base class for structural errors in a command APDU."""

    def __repr__(self):
        return "%s%r" % (type(self).__name__, self.args)


class InvalidChannelNumber(APDUError):
    """Logical channel number is out of range for the addressing mode."""

    def __init__(self, mode, value):
        super().__init__(mode, value)
        self.mode = mode
        self.value = value

    def __str__(self):
        if self.mode == EXTENDED:
            return ("invalid number of extended logical channel; this must "
                    "be within [0, 15] (internally, it adds 4 to that number "
                    "of channel) but the given value is %d" % self.value)
        return ("invalid number of standard logical channel; this must be "
                "within [0, 3] but the given value is %d" % self.value)


class InvalidClassByte(APDUError):
    """Class byte is not compatible with the instruction."""

    def __init__(self, code, allowed, observed):
        super().__init__(code, allowed, observed)
        self.code = code
        self.allowed = allowed
        self.observed = observed

    def __str__(self):
        return ("invalid class byte for instruction '0x%02x'; the class "
                "byte according to the following pattern: %s; but that is "
                "'0x%02x'" %
                (self.code, self.allowed, self.observed))


class ConstructionFailed(APDUError):
    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return "failed to construct command APDU bytes: %s" % self.message


class IllegalPayloadLength(APDUError):
    def __init__(self, length):
        super().__init__(length)
        self.length = length

    def __str__(self):
        return ("illegal length of the command data; this must be within "
                "[0, 255], but %d" % self.length)
