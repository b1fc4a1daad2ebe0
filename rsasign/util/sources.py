# -*- coding: utf-8 -*-
#
# Copyright © 2013-2014 Kimmo Parviainen-Jalanko.
#
import logging
import os

from ..errors import ResourceError

logger = logging.getLogger(__name__)


def read_text(filename, what='Input'):
    """
    Reads a whole text file as UTF-8.

    Line endings are kept as they are in the file and a leading byte order mark is dropped.

    :param filename: path to the file
    :param what: human readable name of the file for error messages
    :raises ResourceError: if the file does not exist or can not be read
    """
    if not os.path.isfile(filename):
        raise ResourceError('{} file not found: {}'.format(what, filename))
    try:
        with open(filename, encoding='utf-8-sig', errors='replace', newline='') as f:
            text = f.read()
    except OSError as e:
        raise ResourceError('Can not read {} file {}: {}'.format(what.lower(), filename, e.strerror)) from e
    logger.debug('Read {} characters from {}'.format(len(text), filename))
    return text


def read_payload(payload=None, filename=None):
    """
    :param payload: payload text given on the command line
    :param filename: file to read the payload from, takes precedence over payload
    :return: payload bytes (UTF-8)
    """
    if filename is not None:
        payload = read_text(filename, 'Payload')
    return payload.encode('utf-8')


def read_key(filename, what='Key'):
    return read_text(filename, what)


def read_signature(signature=None, filename=None):
    """
    Signature read from a file is stripped of surrounding whitespace, one given on the command line is used as is.
    """
    if filename is not None:
        signature = read_text(filename, 'Signature').strip()
    return signature


def write_text(filename, text):
    with open(filename, 'w', encoding='utf-8', newline='') as f:
        f.write(text)
    logger.debug('Wrote {} characters to {}'.format(len(text), filename))
