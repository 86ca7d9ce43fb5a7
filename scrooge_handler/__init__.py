"""
Scrooge Ledger - Handler Module

This module implements transaction validation and per-epoch batch resolution
against the ledger's UTXO pool.
"""

from .handler import TxHandler, EpochResult

__all__ = ['TxHandler', 'EpochResult']
