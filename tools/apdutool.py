#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Tool for encoding UICC command APDUs"""

__version__ = "1.0.0"

import click
from uiccapdu.cla import *
from uiccapdu.instructions import INSTRUCTIONS, MatchMode, get_instruction
from uiccapdu.apdu import CommandAPDU
from uiccapdu.util import to_hex

# Class types by option value, (standard, extended)
_types = {
    'iso': (StandardClassType.ISOIEC7816_4, ExtendedClassType.ISOIEC7816_4),
    'ts': (StandardClassType.TS102_221, ExtendedClassType.TS102_221),
    'other': (StandardClassType.OTHER, None)
}

# Secure messaging indications by option value, (standard, extended)
_sm = {
    'none': (StandardSecureMessaging.NO_SM, ExtendedSecureMessaging.NO_SM),
    'proprietary': (StandardSecureMessaging.PROPRIETARY_SM, None),
    'header': (StandardSecureMessaging.HEADER_NOT_AUTHENTICATED,
               ExtendedSecureMessaging.HEADER_NOT_AUTHENTICATED),
    'header-auth': (StandardSecureMessaging.HEADER_AUTHENTICATED, None)
}


def parse_byte(value):
    """Parses a byte given as decimal or 0x-prefixed hex"""
    try:
        return int(value, 0)
    except ValueError:
        raise click.BadParameter(f"Not a number: {value}")


@ click.group()
@ click.version_option(__version__, message="%(version)s")
def cli():
    """Tool for encoding UICC command APDUs"""


@ cli.command()
@ click.argument('instruction', required=True, metavar='<instruction>')
@ click.argument('p1', required=True, metavar='<p1>')
@ click.argument('p2', required=True, metavar='<p2>')
@ click.option(
    '--type', 'cla_type',
    type=click.Choice(list(_types)), default='iso', show_default=True,
    help='Class type.'
)
@ click.option(
    '--sm', 'sm',
    type=click.Choice(list(_sm)), default='none', show_default=True,
    help='Secure messaging indication.'
)
@ click.option(
    '--channel', 'channel', type=click.INT, default=0, show_default=True,
    help='Logical channel number.'
)
@ click.option(
    '--extended', 'extended', is_flag=True,
    help='Use extended logical channel coding.'
)
@ click.option('--data', 'data', help='Command data as hex string.')
@ click.option('--le', 'le', help='Expected response length.')
def encode(instruction, p1, p2, cla_type, sm, channel, extended, data, le):
    """Encodes command APDU and prints it as hex string"""

    idx = 1 if extended else 0
    type_value, sm_value = _types[cla_type][idx], _sm[sm][idx]
    if type_value is None or sm_value is None:
        raise click.ClickException(
            f"Class type '{cla_type}' with secure messaging '{sm}' is not "
            f"available for {'extended' if extended else 'standard'} channels")

    try:
        ins = get_instruction(instruction)
        if data is not None:
            data = bytes.fromhex(data)
        build = build_extended if extended else build_standard
        cla = build(type_value, sm_value, channel)
        apdu = CommandAPDU(cla, ins, parse_byte(p1), parse_byte(p2),
                           None if le is None else parse_byte(le), data)
        print(to_hex(apdu.serialize()))
    except ValueError as e:
        raise click.ClickException(str(e))


@ cli.command('list')
def list_instructions():
    """Lists supported instructions"""

    for ins in INSTRUCTIONS:
        mode = 'exact' if ins.mode == MatchMode.EXACT else 'masked'
        print(f"{ins.name:<24}{ins.code:02X}  {ins.allowed_patterns()} "
              f"({mode})")


if __name__ == '__main__':
    cli()
