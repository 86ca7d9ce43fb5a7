"""
Implementation of the UTXOPool class for Scrooge Ledger.

The pool is a plain keyed store of every output that is currently spendable.
It holds no validation logic; callers decide what may be inserted or removed.
"""

from typing import Dict, List, Optional, TYPE_CHECKING
import logging
from .errors import PreconditionViolation
from .utxo import UTXO

if TYPE_CHECKING:
    from scrooge_transaction.transaction import TransactionOutput

logger = logging.getLogger(__name__)

class UTXOPool:
    """
    In-memory mapping from UTXO identifiers to the outputs they name.

    Attributes:
        _utxos (Dict[UTXO, TransactionOutput]): Live unspent outputs by identifier
    """

    def __init__(self, other: Optional['UTXOPool'] = None):
        """
        Initialize an empty pool, or a copy of another pool.

        The copy owns its own mapping, so later inserts and removals on either
        pool are invisible to the other. Outputs are immutable and are shared.

        Args:
            other: Optional pool to copy

        Raises:
            PreconditionViolation: If other is not a UTXOPool
        """
        if other is not None and not isinstance(other, UTXOPool):
            raise PreconditionViolation("Can only copy another UTXOPool")

        self._utxos: Dict[UTXO, 'TransactionOutput'] = (
            dict(other._utxos) if other is not None else {}
        )

    def copy(self) -> 'UTXOPool':
        """Return an independent copy of this pool."""
        return UTXOPool(self)

    def contains(self, utxo: UTXO) -> bool:
        """
        Check whether a UTXO is currently spendable.

        Args:
            utxo: Identifier to look up

        Returns:
            bool: True if the identifier is in the pool
        """
        self._check_utxo(utxo)
        return utxo in self._utxos

    def __contains__(self, utxo: object) -> bool:
        return isinstance(utxo, UTXO) and utxo in self._utxos

    def __len__(self) -> int:
        return len(self._utxos)

    def get_tx_output(self, utxo: UTXO) -> Optional['TransactionOutput']:
        """
        Retrieve the output named by a UTXO.

        Args:
            utxo: Identifier to look up

        Returns:
            TransactionOutput if found, None otherwise
        """
        self._check_utxo(utxo)
        return self._utxos.get(utxo)

    def add_utxo(self, utxo: UTXO, tx_out: 'TransactionOutput') -> None:
        """
        Map a UTXO to an output, replacing any existing mapping.

        Args:
            utxo: Identifier of the new output
            tx_out: The output itself

        Raises:
            PreconditionViolation: If either argument is missing
        """
        self._check_utxo(utxo)
        if tx_out is None:
            raise PreconditionViolation("Cannot add a UTXO without an output")

        self._utxos[utxo] = tx_out
        logger.debug(f"added {utxo} value={tx_out.value}")

    def remove_utxo(self, utxo: UTXO) -> None:
        """
        Remove a UTXO from the pool. Removing an absent UTXO does nothing.

        Args:
            utxo: Identifier to remove
        """
        self._check_utxo(utxo)
        if self._utxos.pop(utxo, None) is not None:
            logger.debug(f"removed {utxo}")

    def all_utxos(self) -> List[UTXO]:
        """
        Get a snapshot of every identifier in the pool.

        Returns:
            List of identifiers, in no particular order
        """
        return list(self._utxos.keys())

    def get_total_value(self) -> float:
        """
        Calculate the total value held across all UTXOs.

        Returns:
            float: Sum of all output values
        """
        return sum(tx_out.value for tx_out in self._utxos.values())

    def clear(self) -> None:
        """Remove every UTXO."""
        self._utxos.clear()

    @staticmethod
    def _check_utxo(utxo: UTXO) -> None:
        if not isinstance(utxo, UTXO):
            raise PreconditionViolation(f"Expected a UTXO, got {type(utxo).__name__}")
