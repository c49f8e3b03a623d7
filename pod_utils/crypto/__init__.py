"""
Cryptographic utilities for POD services
Message signing and signature verification
"""

from .signing import (
    sign, verify, resolve_hash,
    load_private_key, load_public_key,
    encode_signature, decode_signature,
)

__all__ = [
    "sign",
    "verify",
    "resolve_hash",
    "load_private_key",
    "load_public_key",
    "encode_signature",
    "decode_signature",
]
