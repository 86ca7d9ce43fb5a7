"""
Signature verification for Scrooge Ledger.

The ledger never signs anything itself. It only needs to answer whether a
signature over some bytes was produced by the owner of a credential, so the
capability is a plain callable that can be swapped for a fake in tests.
"""

from typing import Callable, Optional
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

# verify(credential, message, signature) -> bool
SignatureVerifier = Callable[[bytes, bytes, bytes], bool]


def verify_signature(public_key: bytes, message: bytes, signature: Optional[bytes]) -> bool:
    """
    Verify an Ed25519 signature.

    Args:
        public_key: Raw 32-byte Ed25519 public key of the output owner
        message: Bytes that were signed
        signature: Raw 64-byte signature

    Returns:
        bool: True if the signature is valid; False for a bad signature or a
        malformed key or signature
    """
    if signature is None:
        return False
    try:
        key = Ed25519PublicKey.from_public_bytes(bytes(public_key))
        key.verify(bytes(signature), bytes(message))
        return True
    except (InvalidSignature, ValueError, TypeError):
        return False
