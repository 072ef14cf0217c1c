"""Digest helper used to build the login challenge response."""

import hashlib


def fingerprint(value: str) -> str:
    """Return the 32 character hex MD5 digest of a string.

    The booking service expects MD5 over the UTF-8 bytes of the nonce
    concatenated with the credentials. Not used for anything else.
    """
    return hashlib.md5(value.encode('utf-8')).hexdigest()
