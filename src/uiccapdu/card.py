from .util import *
from .apdu import CommandAPDU, serialize


def code_apdu(apdu_obj) -> bytes:
    """Create APDU byte string from CommandAPDU, byte string or hex string."""
    if isinstance(apdu_obj, (bytes, bytearray)):
        return bytes(apdu_obj)
    elif isinstance(apdu_obj, str):
        return bytes.fromhex(apdu_obj)
    elif not isinstance(apdu_obj, CommandAPDU):
        apdu_obj = CommandAPDU(*apdu_obj)
    return serialize(apdu_obj)


class UICC:
    """UICC connected through a pyscard card connection.

    Status words are returned to the caller as is.
    """

    def __init__(self, connection=None, reader=None, debug=False):
        if connection is None:
            connection = get_connection(reader)
        self.connection = connection
        self.debug = debug

    def transmit(self, apdu) -> tuple:
        """Send command APDU returning response data and status bytes.

        :param apdu: CommandAPDU, tuple of its fields, bytes or hex string
        :return: (data, sw)
        """
        apdu = code_apdu(apdu)
        if self.debug:
            print(">>", to_hex(apdu))
        data, *sw = self.connection.transmit(list(apdu))
        data, sw = bytes(data), bytes(sw)
        if self.debug:
            print("<<", to_hex(data), to_hex(sw))
        return data, sw

    def send(self, cla: int, ins, p1: int, p2: int, le: int = None,
             data=None) -> tuple:
        """Build command APDU and send it to the card."""
        return self.transmit(CommandAPDU(cla, ins, p1, p2, le, data))

    def disconnect(self):
        """Disconnect from smart card interface."""
        self.connection.disconnect()
