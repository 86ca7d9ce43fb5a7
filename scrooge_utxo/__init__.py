"""
Scrooge Ledger - UTXO Module

This module implements the UTXO (Unspent Transaction Output) identifier and the
pool that tracks every output which is currently spendable.
"""

from .errors import PreconditionViolation, ConsistencyFault
from .utxo import UTXO
from .pool import UTXOPool

__all__ = ['UTXO', 'UTXOPool', 'PreconditionViolation', 'ConsistencyFault']
