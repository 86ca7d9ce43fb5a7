"""
Scrooge Ledger - Transaction Module

This module implements the transaction model: inputs that claim earlier
outputs, the outputs a transaction creates, and the byte encoding used for
hashing and signing.
"""

from .transaction import Transaction, TransactionInput, TransactionOutput

__all__ = ['Transaction', 'TransactionInput', 'TransactionOutput']
