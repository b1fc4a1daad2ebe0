# -*- coding: utf-8 -*-
#
# Copyright © 2013-2014 Kimmo Parviainen-Jalanko.
#
"""
Plumbing shared by the signer and verifier programs.
"""
import logging
import sys

from ..const import ExitCode, LOG_FORMAT
from ..errors import (CryptoError, InputError, KeyImportError, ResourceError,
                      SignatureDecodingError)

# Checked in order, first match wins
EXIT_CODES = (
    (InputError, ExitCode.INVALID_ARGUMENTS),
    (ResourceError, ExitCode.FILE_NOT_FOUND),
    (KeyImportError, ExitCode.INVALID_FORMAT),
    (SignatureDecodingError, ExitCode.INVALID_FORMAT),
    (CryptoError, ExitCode.INVALID_FORMAT),
)


def setup_logging(verbose=False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format=LOG_FORMAT, stream=sys.stderr)


def exit_code(error):
    for cls, code in EXIT_CODES:
        if isinstance(error, cls):
            return code
    return ExitCode.ERROR


def error(message):
    print('Error: {}'.format(message), file=sys.stderr)
