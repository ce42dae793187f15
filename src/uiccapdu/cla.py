"""Class byte coding, ISO/IEC 7816-4 and ETSI TS 102 221 clause 10.1.1"""

from .errors import InvalidChannelNumber, STANDARD, EXTENDED

# Number of standard logical channels (0 - 3)
STANDARD_CHANNELS = 4
# Number of extended logical channels (4 - 19, coded as 0 - 15)
EXTENDED_CHANNELS = 16


class StandardClassType:
    """Type bits of the class byte for standard logical channels"""
    # Interindustry class, ISO/IEC 7816-4
    ISOIEC7816_4 = 0b00000000
    # Proprietary class, ETSI TS 102 221
    TS102_221 = 0b10000000
    # Reserved for other specifications
    OTHER = 0b10100000

    # Allowed values
    _values = (ISOIEC7816_4, TS102_221, OTHER)


class StandardSecureMessaging:
    """Secure messaging indication for standard logical channels"""
    # No secure messaging or no indication
    NO_SM = 0b00000000
    # Proprietary secure messaging format
    PROPRIETARY_SM = 0b00000100
    # ISO/IEC 7816-4 secure messaging, command header not authenticated
    HEADER_NOT_AUTHENTICATED = 0b00001000
    # ISO/IEC 7816-4 secure messaging, command header authenticated
    HEADER_AUTHENTICATED = 0b00001100

    # Allowed values
    _values = (NO_SM, PROPRIETARY_SM, HEADER_NOT_AUTHENTICATED,
               HEADER_AUTHENTICATED)


class ExtendedClassType:
    """Type bits of the class byte for extended logical channels"""
    # Further interindustry class, ISO/IEC 7816-4
    ISOIEC7816_4 = 0b01000000
    # Proprietary class, ETSI TS 102 221
    TS102_221 = 0b11000000

    # Allowed values
    _values = (ISOIEC7816_4, TS102_221)


class ExtendedSecureMessaging:
    """Secure messaging indication for extended logical channels"""
    # No secure messaging or no indication
    NO_SM = 0b00000000
    # ISO/IEC 7816-4 secure messaging, command header not authenticated
    HEADER_NOT_AUTHENTICATED = 0b00100000

    # Allowed values
    _values = (NO_SM, HEADER_NOT_AUTHENTICATED)


class Cla(int):
    """Class byte of a command APDU."""

    def __new__(cls, value):
        if 0x00 <= value <= 0xFF:
            return super(Cla, cls).__new__(cls, value)
        raise ValueError("Class byte out of range: %r" % value)

    def __str__(self):
        return "%02X" % self

    def __repr__(self):
        return "%s(0x%02X)" % (type(self).__name__, self)


def _build(cla_type, secure_messaging, channel, facets, mode, n_channels):
    type_facet, sm_facet = facets
    if cla_type not in type_facet._values:
        raise ValueError("Invalid class type: %r" % cla_type)
    if secure_messaging not in sm_facet._values:
        raise ValueError("Invalid secure messaging indication: %r" %
                         secure_messaging)
    if not (0 <= channel < n_channels):
        raise InvalidChannelNumber(mode, channel)
    return Cla(cla_type | secure_messaging | channel)


def build_standard(cla_type: int, secure_messaging: int,
                   channel: int) -> Cla:
    """Build a class byte addressing one of standard logical channels.

    :param cla_type: one of StandardClassType values
    :param secure_messaging: one of StandardSecureMessaging values
    :param channel: logical channel number, 0 - 3
    :return: class byte
    """
    return _build(cla_type, secure_messaging, channel,
                  (StandardClassType, StandardSecureMessaging),
                  STANDARD, STANDARD_CHANNELS)


def build_extended(cla_type: int, secure_messaging: int,
                   channel: int) -> Cla:
    """Build a class byte addressing one of extended logical channels.

    The channel is given as extended channel index 0 - 15, logical channel
    4 - 19 for the card. No offset is applied here.

    :param cla_type: one of ExtendedClassType values
    :param secure_messaging: one of ExtendedSecureMessaging values
    :param channel: extended logical channel index, 0 - 15
    :return: class byte
    """
    return _build(cla_type, secure_messaging, channel,
                  (ExtendedClassType, ExtendedSecureMessaging),
                  EXTENDED, EXTENDED_CHANNELS)
