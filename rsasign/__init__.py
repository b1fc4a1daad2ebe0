# -*- coding: utf-8 -*-
#
# Copyright © 2013-2014 Kimmo Parviainen-Jalanko.
#
"""
RSA payload signing and signature verification (SHA-256, PKCS#1 v1.5)
"""
__version__ = (0, 1, 0)
