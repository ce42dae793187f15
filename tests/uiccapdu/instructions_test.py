import pytest
from uiccapdu.cla import *
from uiccapdu.instructions import *
from uiccapdu.errors import *

ISO_PATTERNS = "'0x00' or '0x40' or '0x60'"
TS_PATTERNS = "'0x80' or '0xc0' or '0xe0'"


def test_select_file():
    cla = build_standard(StandardClassType.ISOIEC7816_4,
                         StandardSecureMessaging.HEADER_AUTHENTICATED, 3)
    assert cla == 0b00001111
    assert resolve(SELECT_FILE, cla) == 0xA4
    cla = build_extended(ExtendedClassType.ISOIEC7816_4,
                         ExtendedSecureMessaging.NO_SM, 15)
    assert cla == 0b01001111
    assert SELECT_FILE.resolve(cla) == 0xA4
    cla = build_extended(ExtendedClassType.ISOIEC7816_4,
                         ExtendedSecureMessaging.HEADER_NOT_AUTHENTICATED, 15)
    assert cla == 0b01101111
    assert SELECT_FILE.resolve(cla) == 0xA4


def test_select_file_fail():
    classes = [
        build_standard(StandardClassType.TS102_221,
                       StandardSecureMessaging.HEADER_AUTHENTICATED, 3),
        build_standard(StandardClassType.OTHER,
                       StandardSecureMessaging.HEADER_AUTHENTICATED, 3),
        build_extended(ExtendedClassType.TS102_221,
                       ExtendedSecureMessaging.NO_SM, 15)
    ]
    for cla, observed in zip(classes, (0b10001111, 0b10101111, 0b11001111)):
        with pytest.raises(InvalidClassByte) as e:
            SELECT_FILE.resolve(cla)
        assert e.value.args == (0xA4, ISO_PATTERNS, observed)


def test_select_file_error_text():
    with pytest.raises(InvalidClassByte) as e:
        resolve(SELECT_FILE, 0x8F)
    assert (str(e.value) == "invalid class byte for instruction '0xa4'; the "
            "class byte according to the following pattern: '0x00' or "
            "'0x40' or '0x60'; but that is '0x8f'")


def test_masked_all_classes():
    for cla in range(0x100):
        if cla & 0xF0 in (0x00, 0x40, 0x60):
            assert resolve(READ_BINARY, cla) == 0xB0
        else:
            with pytest.raises(InvalidClassByte):
                resolve(READ_BINARY, cla)
        if cla & 0xF0 in (0x80, 0xC0, 0xE0):
            assert resolve(STATUS, cla) == 0xF2
        else:
            with pytest.raises(InvalidClassByte) as e:
                resolve(STATUS, cla)
            assert e.value.allowed == TS_PATTERNS


def test_fetch():
    cla = build_standard(StandardClassType.TS102_221,
                         StandardSecureMessaging.NO_SM, 0)
    assert FETCH.resolve(cla) == 0x12


def test_fetch_fail():
    cla = build_standard(StandardClassType.TS102_221,
                         StandardSecureMessaging.NO_SM, 1)
    with pytest.raises(InvalidClassByte) as e:
        FETCH.resolve(cla)
    assert e.value.args == (0x12, "'0x80'", 0b10000001)


def test_exact_all_classes():
    for ins in (TERMINAL_PROFILE, ENVELOPE, FETCH, TERMINAL_RESPONSE,
                SUSPEND_UICC):
        assert ins.mode == MatchMode.EXACT
        for cla in range(0x100):
            if cla == 0x80:
                assert ins.resolve(cla) == ins.code
            else:
                with pytest.raises(InvalidClassByte):
                    ins.resolve(cla)


def test_catalog():
    codes = {
        'SELECT FILE': 0xA4, 'STATUS': 0xF2, 'READ BINARY': 0xB0,
        'UPDATE BINARY': 0xD6, 'READ RECORD': 0xB2, 'UPDATE RECORD': 0xDC,
        'SEARCH RECORD': 0xA2, 'INCREASE': 0x32, 'RETRIEVE DATA': 0xCB,
        'SET DATA': 0xDB, 'VERIFY PIN': 0x20, 'CHANGE PIN': 0x24,
        'DISABLE PIN': 0x26, 'ENABLE PIN': 0x28, 'UNBLOCK PIN': 0x2C,
        'DEACTIVATE FILE': 0x04, 'ACTIVATE FILE': 0x44,
        'AUTHENTICATE': 0x88, 'GET CHALLENGE': 0x84,
        'TERMINAL CAPABILITY': 0xAA, 'TERMINAL PROFILE': 0x10,
        'ENVELOPE': 0xC2, 'FETCH': 0x12, 'TERMINAL RESPONSE': 0x14,
        'MANAGE CHANNEL': 0x70, 'MANAGE SECURE CHANNEL': 0x73,
        'TRANSACT DATA': 0x75, 'SUSPEND UICC': 0x76, 'GET IDENTITY': 0x78,
        'GET RESPONSE': 0xC0
    }
    assert len(INSTRUCTIONS) == len(codes)
    assert {ins.name: ins.code for ins in INSTRUCTIONS} == codes

    ts_names = ('STATUS', 'INCREASE', 'RETRIEVE DATA', 'SET DATA',
                'TERMINAL CAPABILITY', 'GET IDENTITY')
    for ins in INSTRUCTIONS:
        if ins.mode == MatchMode.EXACT:
            assert ins.allowed_patterns() == "'0x80'"
        elif ins.name in ts_names:
            assert ins.allowed_patterns() == TS_PATTERNS
        else:
            assert ins.allowed_patterns() == ISO_PATTERNS


def test_get_instruction():
    assert get_instruction('SELECT FILE') is SELECT_FILE
    assert get_instruction('select_file') is SELECT_FILE
    assert get_instruction('Manage-Secure-Channel') is MANAGE_SECURE_CHANNEL
    assert str(get_instruction('fetch')) == 'FETCH'
    with pytest.raises(ValueError):
        get_instruction('READ BINARY RECORD')


def test_class_out_of_range():
    # High nibble of 0x180 and -0x80 masks to 0x80, still not a class byte
    for cla in (0x180, -0x80, 0x100):
        with pytest.raises(ValueError):
            resolve(STATUS, cla)
        with pytest.raises(ValueError):
            STATUS.resolve(cla)
    with pytest.raises(ValueError):
        resolve(FETCH, 0x180)
