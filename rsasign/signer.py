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
RSA API Request Signer

Signs API request payloads using RSA private keys (SHA-256, PKCS#1 v1.5).

Usage:
    rsa-signer (--file=<path> | --payload=<text>) --key=<keyfile> [--output=<file>] [--encoding=<enc>] [-v]
    rsa-signer -h | --help

Options:
    --file=<path>       File containing the payload to sign.
    --payload=<text>    Payload to sign, given directly.
    --key=<keyfile>     RSA private key file (PEM).
    --output=<file>     Write the signature to this file instead of standard output.
    --encoding=<enc>    Signature encoding, base64 or hex [default: base64].
    -v --verbose        Debug logging to standard error.
    -h --help           Show this screen.

Examples:
    rsa-signer --file=request.json --key=private-key.pem
    rsa-signer --payload="API request data" --key=private-key.pem --output=signature.txt
    rsa-signer --file=data.json --key=key.pem --encoding=hex
"""

logger = logging.getLogger(__name__)


def run(opts):
    """
    Signs the payload described by docopt options.

    :return: ExitCode
    """
    encoding = Encoding.parse(opts['--encoding'])
    if not (opts['--file'] or opts['--payload']):
        raise InputError('Either --file or --payload is required')
    payload = sources.read_payload(opts['--payload'], opts['--file'])
    private_key_pem = sources.read_key(opts['--key'], 'Private key')

    sig = signature.sign(payload, private_key_pem, encoding)

    if opts['--output']:
        try:
            sources.write_text(opts['--output'], sig)
        except OSError as e:
            console.error('Can not write output file: {}'.format(e))
            return ExitCode.ERROR
        print('Signature written to: {}'.format(opts['--output']))
    else:
        print(sig)
    return ExitCode.OK


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
