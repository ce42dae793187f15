"""UICC instructions, ETSI TS 102 221 clause 10.1.2"""

from collections import namedtuple
from .errors import InvalidClassByte
from .cla import Cla

# Mask applied to the class byte before comparing with masked patterns
CLA_MASK = 0xF0


class MatchMode:
    """How the class byte is compared with reference patterns"""
    # High nibble of the class byte must be equal to a pattern
    MASKED = 0
    # Whole class byte must be equal to a pattern
    EXACT = 1

    # Allowed values
    _values = (MASKED, EXACT)


# Class byte patterns: interindustry (first and further coding)
_ISO = (0x00, 0x40, 0x60)
# Class byte patterns: TS 102 221 proprietary
_TS = (0x80, 0xC0, 0xE0)
# Class byte of CAT commands, basic logical channel only
_CAT = (0x80,)


class Instruction(namedtuple('Instruction',
                             ['name', 'code', 'patterns', 'mode'])):
    """Instruction with its INS code and class byte compatibility rule."""

    __slots__ = ()

    def resolve(self, cla: int) -> int:
        """Return INS code if the class byte is compatible."""
        return resolve(self, cla)

    def allowed_patterns(self) -> str:
        """Return human-readable list of allowed class byte patterns"""
        return " or ".join("'0x%02x'" % p for p in self.patterns)

    def __str__(self):
        return self.name


def _ins(name, code, patterns, mode=MatchMode.MASKED):
    return Instruction(name, code, patterns, mode)


SELECT_FILE = _ins('SELECT FILE', 0xA4, _ISO)
STATUS = _ins('STATUS', 0xF2, _TS)
READ_BINARY = _ins('READ BINARY', 0xB0, _ISO)
UPDATE_BINARY = _ins('UPDATE BINARY', 0xD6, _ISO)
READ_RECORD = _ins('READ RECORD', 0xB2, _ISO)
UPDATE_RECORD = _ins('UPDATE RECORD', 0xDC, _ISO)
SEARCH_RECORD = _ins('SEARCH RECORD', 0xA2, _ISO)
INCREASE = _ins('INCREASE', 0x32, _TS)
RETRIEVE_DATA = _ins('RETRIEVE DATA', 0xCB, _TS)
SET_DATA = _ins('SET DATA', 0xDB, _TS)
VERIFY_PIN = _ins('VERIFY PIN', 0x20, _ISO)
CHANGE_PIN = _ins('CHANGE PIN', 0x24, _ISO)
DISABLE_PIN = _ins('DISABLE PIN', 0x26, _ISO)
ENABLE_PIN = _ins('ENABLE PIN', 0x28, _ISO)
UNBLOCK_PIN = _ins('UNBLOCK PIN', 0x2C, _ISO)
DEACTIVATE_FILE = _ins('DEACTIVATE FILE', 0x04, _ISO)
ACTIVATE_FILE = _ins('ACTIVATE FILE', 0x44, _ISO)
AUTHENTICATE = _ins('AUTHENTICATE', 0x88, _ISO)
GET_CHALLENGE = _ins('GET CHALLENGE', 0x84, _ISO)
TERMINAL_CAPABILITY = _ins('TERMINAL CAPABILITY', 0xAA, _TS)
TERMINAL_PROFILE = _ins('TERMINAL PROFILE', 0x10, _CAT, MatchMode.EXACT)
ENVELOPE = _ins('ENVELOPE', 0xC2, _CAT, MatchMode.EXACT)
FETCH = _ins('FETCH', 0x12, _CAT, MatchMode.EXACT)
TERMINAL_RESPONSE = _ins('TERMINAL RESPONSE', 0x14, _CAT, MatchMode.EXACT)
MANAGE_CHANNEL = _ins('MANAGE CHANNEL', 0x70, _ISO)
MANAGE_SECURE_CHANNEL = _ins('MANAGE SECURE CHANNEL', 0x73, _ISO)
TRANSACT_DATA = _ins('TRANSACT DATA', 0x75, _ISO)
SUSPEND_UICC = _ins('SUSPEND UICC', 0x76, _CAT, MatchMode.EXACT)
GET_IDENTITY = _ins('GET IDENTITY', 0x78, _TS)
GET_RESPONSE = _ins('GET RESPONSE', 0xC0, _ISO)

# All supported instructions
INSTRUCTIONS = (
    SELECT_FILE, STATUS, READ_BINARY, UPDATE_BINARY, READ_RECORD,
    UPDATE_RECORD, SEARCH_RECORD, INCREASE, RETRIEVE_DATA, SET_DATA,
    VERIFY_PIN, CHANGE_PIN, DISABLE_PIN, ENABLE_PIN, UNBLOCK_PIN,
    DEACTIVATE_FILE, ACTIVATE_FILE, AUTHENTICATE, GET_CHALLENGE,
    TERMINAL_CAPABILITY, TERMINAL_PROFILE, ENVELOPE, FETCH,
    TERMINAL_RESPONSE, MANAGE_CHANNEL, MANAGE_SECURE_CHANNEL, TRANSACT_DATA,
    SUSPEND_UICC, GET_IDENTITY, GET_RESPONSE
)

_BY_NAME = {ins.name: ins for ins in INSTRUCTIONS}


def _normalize_name(name: str) -> str:
    return name.strip().upper().replace('_', ' ').replace('-', ' ')


def get_instruction(name: str) -> Instruction:
    """Look up an instruction by name, e.g. 'SELECT FILE' or 'select_file'"""
    ins = _BY_NAME.get(_normalize_name(name))
    if ins is None:
        raise ValueError("Unknown instruction: %s" % name)
    return ins


def resolve(instruction: Instruction, cla: int) -> int:
    """Return INS code of the instruction for the given class byte.

    :param instruction: one of the supported instructions
    :param cla: class byte
    :return: INS code
    :raises ValueError: if the class byte is out of range
    :raises InvalidClassByte: if the class byte matches none of the
        instruction's patterns
    """
    cla = Cla(cla)
    if instruction.mode == MatchMode.EXACT:
        value = cla
    else:
        value = cla & CLA_MASK
    if value in instruction.patterns:
        return instruction.code
    raise InvalidClassByte(instruction.code, instruction.allowed_patterns(),
                           int(cla))
