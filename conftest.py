"""
Shared fixtures for the Scrooge Ledger test suite.
"""

import hashlib
import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat


class FakeKeyring:
    """
    Deterministic stand-in for real keys.

    The credential of owner "A" is b"fake-key:A" and a signature is
    sha256(credential | message), so any verifier call can be reproduced.
    """

    def __init__(self):
        self.verify_calls = 0

    def credential(self, name: str) -> bytes:
        return f"fake-key:{name}".encode("utf-8")

    def sign(self, name: str, message: bytes) -> bytes:
        return hashlib.sha256(self.credential(name) + b"|" + message).digest()

    def verify(self, credential: bytes, message: bytes, signature: bytes) -> bool:
        self.verify_calls += 1
        expected = hashlib.sha256(credential + b"|" + message).digest()
        return signature == expected

    def sign_inputs(self, tx, *names: str):
        """Sign input i of tx with owner names[i]."""
        for index, name in enumerate(names):
            tx.add_signature(index, self.sign(name, tx.get_raw_data_to_sign(index)))
        return tx


class Ed25519Key:
    """Real Ed25519 key pair for end-to-end tests."""

    def __init__(self):
        self.private_key = Ed25519PrivateKey.generate()
        self.public_bytes = self.private_key.public_key().public_bytes(
            Encoding.Raw, PublicFormat.Raw
        )

    def sign(self, message: bytes) -> bytes:
        return self.private_key.sign(message)


@pytest.fixture
def keyring():
    """Create a fresh fake keyring for each test."""
    return FakeKeyring()


@pytest.fixture
def make_ed25519_key():
    """Factory for real Ed25519 key pairs."""
    return Ed25519Key


@pytest.fixture
def genesis_hash():
    """Hash standing in for the transaction that seeded the pool."""
    return hashlib.sha256(b"genesis").digest()
