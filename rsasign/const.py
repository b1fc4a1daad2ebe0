# -*- coding: utf-8 -*-
#
# Copyright © 2013-2014 Kimmo Parviainen-Jalanko.
#

# Constants for the signer and verifier programs
from enum import Enum, IntEnum

from .errors import EncodingError

# Name of the hash method as understood by python-rsa
HASH_METHOD = 'SHA-256'

LOG_FORMAT = '%(levelname)s:%(name)s.%(funcName)s:[%(lineno)s]: %(message)s'


class Encoding(Enum):
    base64 = 'base64'
    hex = 'hex'

    @classmethod
    def parse(cls, token):
        """
        Converts an encoding token (case insensitive) or an Encoding to Encoding.

        :raises EncodingError: for anything but 'base64' or 'hex'
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(str(token).lower())
        except ValueError:
            raise EncodingError("Encoding must be 'base64' or 'hex', got {!r}".format(token)) from None


DEFAULT_ENCODING = Encoding.base64


class ExitCode(IntEnum):
    OK = 0
    INVALID_SIGNATURE = 1
    INVALID_ARGUMENTS = 2
    FILE_NOT_FOUND = 3
    INVALID_FORMAT = 4  # Key or signature format, or a failure in the RSA primitive
    ERROR = 5
