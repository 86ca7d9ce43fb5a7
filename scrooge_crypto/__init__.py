"""
Scrooge Ledger - Crypto Module

This module defines the signature-verification capability the validator relies
on, together with the default Ed25519 implementation.
"""

from .signature import SignatureVerifier, verify_signature

__all__ = ['SignatureVerifier', 'verify_signature']
