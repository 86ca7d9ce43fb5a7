"""
Implementation of the UTXO identifier for Scrooge Ledger.

A UTXO identifier names exactly one output: the output at position `index`
of the transaction whose content hash is `tx_hash`.
"""

from typing import Tuple
from .errors import PreconditionViolation

class UTXO:
    """
    Identifier of an unspent transaction output.

    Attributes:
        tx_hash (bytes): Hash of the transaction that created the output
        index (int): Position of the output within that transaction
    """

    __slots__ = ('_tx_hash', '_index')

    def __init__(self, tx_hash: bytes, index: int):
        """
        Initialize a UTXO identifier.

        Args:
            tx_hash: Hash of the creating transaction
            index: Index of the output within the creating transaction

        Raises:
            PreconditionViolation: If tx_hash is not bytes or index is not a
                non-negative integer
        """
        if not isinstance(tx_hash, (bytes, bytearray)):
            raise PreconditionViolation("UTXO tx_hash must be bytes")
        if isinstance(index, bool) or not isinstance(index, int):
            raise PreconditionViolation("UTXO index must be an integer")
        if index < 0:
            raise PreconditionViolation("UTXO index must be non-negative")

        self._tx_hash = bytes(tx_hash)
        self._index = index

    @property
    def tx_hash(self) -> bytes:
        return self._tx_hash

    @property
    def index(self) -> int:
        return self._index

    def _key(self) -> Tuple[bytes, int]:
        return (self._tx_hash, self._index)

    def __repr__(self) -> str:
        """Return string representation of the identifier."""
        return f"UTXO(tx_hash={self._tx_hash.hex()[:16]}, index={self._index})"

    def __eq__(self, other: object) -> bool:
        """Two identifiers are equal iff both hash and index match."""
        if not isinstance(other, UTXO):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: 'UTXO') -> bool:
        """Order by transaction hash, then output index."""
        if not isinstance(other, UTXO):
            return NotImplemented
        return self._key() < other._key()
