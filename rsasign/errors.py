# -*- coding: utf-8 -*-
#
# Copyright © 2013-2014 Kimmo Parviainen-Jalanko.
#
"""
Exceptions raised by the signing and verification operations.
"""


class RsaSignError(Exception):
    pass


class InputError(RsaSignError):
    """Invalid command line arguments."""


class EncodingError(InputError):
    """Signature encoding is neither base64 nor hex."""


class ResourceError(RsaSignError):
    """A payload, key or signature file does not exist or can not be read."""


class KeyImportError(RsaSignError):
    """PEM text does not hold an RSA key of the requested type."""


class SignatureDecodingError(RsaSignError):
    """Signature text is not valid for its stated encoding."""


class CryptoError(RsaSignError):
    pass


class SigningError(CryptoError):
    pass


class VerificationError(CryptoError):
    pass
