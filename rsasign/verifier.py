#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright © 2013-2014 Kimmo Parviainen-Jalanko.
#

import logging
import sys

import docopt

from rsasign import signature
from rsasign.const import Encoding, ExitCode
from rsasign.errors import InputError, RsaSignError
from rsasign.util import console, sources

__doc__ = """
RSA API Signature Verifier

Verifies API request signatures using RSA public keys (SHA-256, PKCS#1 v1.5).

Usage:
    rsa-verifier (--file=<path> | --payload=<text>) (--signature=<sig> | --sigfile=<path>) --key=<keyfile> [--encoding=<enc>] [-v]
    rsa-verifier -h | --help

Options:
    --file=<path>       File containing the payload to verify.
    --payload=<text>    Payload to verify, given directly.
    --signature=<sig>   Signature string.
    --sigfile=<path>    File containing the signature.
    --key=<keyfile>     RSA public key file (PEM).
    --encoding=<enc>    Signature encoding, base64 or hex [default: base64].
    -v --verbose        Debug logging to standard error.
    -h --help           Show this screen.

Exit codes:
    0  Valid signature
    1  Invalid signature
    2  Invalid arguments
    3  File not found
    4  Invalid key or signature format
    5  Unexpected error

Examples:
    rsa-verifier --file=request.json --signature="base64sig..." --key=public-key.pem
    rsa-verifier --file=request.json --sigfile=signature.txt --key=public-key.pem
    rsa-verifier --payload="API data" --signature="sig..." --key=key.pem
"""

logger = logging.getLogger(__name__)


def run(opts):
    """
    Verifies the payload and signature described by docopt options.

    :return: ExitCode.OK for a valid signature, ExitCode.INVALID_SIGNATURE otherwise
    """
    encoding = Encoding.parse(opts['--encoding'])
    if not (opts['--file'] or opts['--payload']):
        raise InputError('Either --file or --payload is required')
    if not (opts['--sigfile'] or opts['--signature']):
        raise InputError('Either --signature or --sigfile is required')
    payload = sources.read_payload(opts['--payload'], opts['--file'])
    sig = sources.read_signature(opts['--signature'], opts['--sigfile'])
    public_key_pem = sources.read_key(opts['--key'], 'Public key')

    if signature.verify(payload, sig, encoding, public_key_pem):
        print('VALID: Signature verification successful')
        return ExitCode.OK
    print('INVALID: Signature verification failed')
    return ExitCode.INVALID_SIGNATURE


def main(argv=None):
    try:
        opts = docopt.docopt(__doc__, argv=argv)
    except docopt.DocoptExit as e:
        print(e, file=sys.stderr)
        return ExitCode.INVALID_ARGUMENTS
    console.setup_logging(opts['--verbose'])
    try:
        return run(opts)
    except RsaSignError as e:
        console.error(e)
        return console.exit_code(e)
    except Exception as e:
        logger.exception('Unexpected error')
        print('Unexpected error: {}'.format(e), file=sys.stderr)
        return ExitCode.ERROR


if __name__ == '__main__':
    sys.exit(main())
