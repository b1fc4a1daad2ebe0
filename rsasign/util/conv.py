# -*- coding: utf-8 -*-
#
# Copyright © 2013-2014 Kimmo Parviainen-Jalanko.
#
"""
Conversions between signature bytes and their printable transport forms.
"""
import base64
import binascii
import logging
import re

from ..const import Encoding
from ..errors import SignatureDecodingError

logger = logging.getLogger(__name__)

# Separators tolerated inside hex signatures, e.g. 'DE-AD-BE-EF' or 'dead beef'
HEX_SEPARATORS = re.compile(r'[\s\-]+')
WHITESPACE = re.compile(r'\s+')


def to_base64(data):
    return base64.b64encode(data).decode('ascii')


def from_base64(text):
    text = WHITESPACE.sub('', text)
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise SignatureDecodingError('Invalid base64 signature: {}'.format(e)) from e


def to_hex(data):
    return binascii.hexlify(data).decode('ascii')


def from_hex(text):
    """
    Decodes hex in either case. Spaces, hyphens and other whitespace between digits are ignored.
    """
    text = HEX_SEPARATORS.sub('', text)
    if len(text) % 2:
        raise SignatureDecodingError('Hex signature must have an even number of characters')
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise SignatureDecodingError('Invalid hex signature: {}'.format(e)) from e


_ENCODERS = {
    Encoding.base64: to_base64,
    Encoding.hex: to_hex,
}

_DECODERS = {
    Encoding.base64: from_base64,
    Encoding.hex: from_hex,
}


def encode(data, encoding):
    """
    :param data: raw signature bytes
    :param encoding: Encoding or encoding token
    :return: str
    """
    encoding = Encoding.parse(encoding)
    return _ENCODERS[encoding](bytes(data))


def decode(text, encoding):
    """
    :param text: signature text
    :param encoding: Encoding or encoding token
    :return: bytes
    :raises SignatureDecodingError: if text is not valid for encoding
    """
    encoding = Encoding.parse(encoding)
    data = _DECODERS[encoding](text)
    logger.debug('Decoded {} bytes of {} signature'.format(len(data), encoding.name))
    return data
