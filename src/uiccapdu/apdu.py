"""Command APDU encoding, ETSI TS 102 221 clause 10.1"""

from collections import namedtuple
from . import instructions
from .errors import InvalidClassByte, ConstructionFailed, IllegalPayloadLength

# Offset of the CLA byte within APDU
OFF_CLA = 0
# Offset of the INS byte within APDU
OFF_INS = 1
# Offset of the P1 byte within APDU
OFF_P1 = 2
# Offset of the P2 byte within APDU
OFF_P2 = 3
# Offset of the Lc byte within APDU
OFF_LC = 4
# Offset of the Data field within APDU
OFF_DATA = 5

# Maximum length of command data in a short APDU
LC_MAX = 255
# Maximum value of the Le byte in a short APDU
LE_MAX = 255


def _to_bytes(data) -> bytes:
    # str -> hex
    if isinstance(data, str):
        return bytes.fromhex(data)
    # bytes(n) would produce n zero bytes
    if isinstance(data, int):
        raise TypeError("Command data must be bytes, not int")
    return bytes(data)


def _check_byte(name, value, max_value=0xFF):
    if not (0 <= value <= max_value):
        raise ValueError("%s out of range: %r" % (name, value))


class CommandAPDU(namedtuple('CommandAPDU',
                             ['cla', 'ins', 'p1', 'p2', 'le', 'data'],
                             defaults=(None, None))):
    """Command APDU: CLA, instruction, P1, P2, optional Le and data.

    `data` of None means no command data; b'' is coded as Lc = 0.
    """

    __slots__ = ()

    @property
    def case(self) -> int:
        """ISO/IEC 7816-4 case of a short APDU (1 - 4)"""
        if self.data is None:
            return 1 if self.le is None else 2
        return 3 if self.le is None else 4

    def serialize(self) -> bytes:
        return serialize(self)


def serialize(apdu: CommandAPDU) -> bytes:
    """Encode command APDU to bytes: CLA INS P1 P2 [Lc Data] [Le]

    :param apdu: command APDU
    :return: byte string ready for transmission
    :raises ConstructionFailed: if the class byte is not compatible with the
        instruction
    :raises IllegalPayloadLength: if command data exceeds 255 bytes
    """
    try:
        ins = instructions.resolve(apdu.ins, apdu.cla)
    except InvalidClassByte as e:
        raise ConstructionFailed(str(e)) from e

    _check_byte("P1", apdu.p1)
    _check_byte("P2", apdu.p2)
    res = bytearray([apdu.cla, ins, apdu.p1, apdu.p2])

    if apdu.data is not None:
        data = _to_bytes(apdu.data)
        if len(data) > LC_MAX:
            raise IllegalPayloadLength(len(data))
        res.append(len(data))
        res.extend(data)

    if apdu.le is not None:
        _check_byte("Le", apdu.le, LE_MAX)
        res.append(apdu.le)

    return bytes(res)
