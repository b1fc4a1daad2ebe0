# -*- coding: utf-8 -*-
#
# Copyright © 2014 Kimmo Parviainen-Jalanko.
#

"""
High level interface to RSA signatures with SHA-256 and `PKCS#1 v1.5 <https://tools.ietf.org/html/rfc8017#section-8.2>`_ padding.

PKCS#1 v1.5 signatures are deterministic: the same payload signed with the same key always
produces the same signature.
"""
import logging

import rsa

from .const import DEFAULT_ENCODING, Encoding, HASH_METHOD
from .errors import SigningError, VerificationError
from .util import conv
from .util import pubkey

logger = logging.getLogger(__name__)


def sign(payload, private_key_pem, encoding=DEFAULT_ENCODING):
    """
    Signs payload with the RSA private key in private_key_pem.

    :param payload: bytes to sign
    :param private_key_pem: PEM text of an RSA private key
    :param encoding: Encoding (or its name) of the returned signature
    :return: signature text, base64 or lowercase hex
    :raises EncodingError: if encoding is not supported
    :raises KeyImportError: if private_key_pem is not an RSA private key
    :raises SigningError: if the RSA primitive fails, e.g. because the key is too small
    """
    assert isinstance(payload, bytes)
    encoding = Encoding.parse(encoding)
    with pubkey.private_key(private_key_pem) as key:
        try:
            signature = rsa.sign(payload, key, HASH_METHOD)
        except Exception as e:
            raise SigningError('Failed to sign payload: {}'.format(e)) from e
    logger.debug('Signed {} bytes, signature is {} bytes'.format(len(payload), len(signature)))
    return conv.encode(signature, encoding)


def verify(payload, signature, encoding, public_key_pem):
    """
    Verifies that signature was made over payload by the owner of public_key_pem.

    :param payload: bytes that were signed
    :param signature: signature text
    :param encoding: Encoding (or its name) the signature text is in
    :param public_key_pem: PEM text of an RSA public key
    :return: True if the signature is valid, False otherwise
    :raises EncodingError: if encoding is not supported
    :raises SignatureDecodingError: if signature is not valid base64 / hex
    :raises KeyImportError: if public_key_pem is not an RSA public key
    :raises VerificationError: if the RSA primitive fails for any other reason
    """
    assert isinstance(payload, bytes)
    signature = conv.decode(signature, Encoding.parse(encoding))
    with pubkey.public_key(public_key_pem) as key:
        try:
            hash_method = rsa.verify(payload, signature, key)
        except pubkey.VerifyError:
            logger.debug('Signature does not match payload and key')
            return False
        except Exception as e:
            raise VerificationError('Failed to verify signature: {}'.format(e)) from e
    if hash_method != HASH_METHOD:
        logger.debug('Signature uses {}, expected {}'.format(hash_method, HASH_METHOD))
        return False
    return True
