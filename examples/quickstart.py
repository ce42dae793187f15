from uiccapdu.cla import *
from uiccapdu.instructions import *
from uiccapdu.card import UICC

# File identifiers
MF = b'\x3F\x00'
EF_ICCID = b'\x2F\xE2'


def select(card: UICC, fid: bytes) -> bytes:
    """Select file by identifier returning FCP template

    :param card: instance of UICC interface
    :param fid: file identifier
    :return: FCP template or empty byte string
    """
    cla = build_standard(StandardClassType.ISOIEC7816_4,
                         StandardSecureMessaging.NO_SM, 0)
    data, sw = card.send(cla, SELECT_FILE, 0x00, 0x04, data=fid)
    if sw[0] == 0x61:
        data, sw = card.send(cla, GET_RESPONSE, 0x00, 0x00, le=sw[1])
    return data


if __name__ == '__main__':
    # Reads ICCID using first available reader

    card = UICC(debug=True)
    try:
        select(card, MF)
        select(card, EF_ICCID)
        cla = build_standard(StandardClassType.ISOIEC7816_4,
                             StandardSecureMessaging.NO_SM, 0)
        iccid, sw = card.send(cla, READ_BINARY, 0x00, 0x00, le=10)
        print("ICCID:", iccid.hex().upper(), "SW:", sw.hex().upper())
    finally:
        card.disconnect()
