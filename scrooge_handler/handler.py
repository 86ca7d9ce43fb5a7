"""
Implementation of the TxHandler class for Scrooge Ledger.

The handler owns a private copy of the UTXO pool. It validates single
transactions against that pool and, once per epoch, commits a mutually
consistent subset of an unordered batch of candidates.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple
import logging
from scrooge_crypto.signature import SignatureVerifier, verify_signature
from scrooge_transaction.transaction import Transaction, TransactionOutput
from scrooge_utxo.errors import ConsistencyFault, PreconditionViolation
from scrooge_utxo.pool import UTXOPool
from scrooge_utxo.utxo import UTXO

logger = logging.getLogger(__name__)

class EpochResult:
    """
    Outcome of one epoch.

    Attributes:
        accepted (List[Transaction]): Committed transactions, in commit order
        rejected (List[Tuple[int, str]]): (candidate index, reason) for every
                                          candidate that was never committed;
                                          the reason is from its last evaluation
        passes (int): Number of passes over the batch; the last one either
                      committed nothing or committed every remaining candidate
    """

    def __init__(self):
        self.accepted: List[Transaction] = []
        self.rejected: List[Tuple[int, str]] = []
        self.passes = 0

class TxHandler:
    """
    Validates transactions and applies accepted ones to a private UTXO pool.

    Attributes:
        verifier (SignatureVerifier): verify(credential, message, signature)
        _utxo_pool (UTXOPool): Current unspent outputs, owned by this handler
    """

    def __init__(self, utxo_pool: UTXOPool, verifier: SignatureVerifier = verify_signature):
        """
        Initialize the handler from a snapshot of the pool.

        Args:
            utxo_pool: Pool to copy; the caller's pool is never modified
            verifier: Signature-verification capability

        Raises:
            PreconditionViolation: If utxo_pool is not a UTXOPool or the
                verifier is not callable
        """
        if not isinstance(utxo_pool, UTXOPool):
            raise PreconditionViolation("TxHandler requires a UTXOPool")
        if not callable(verifier):
            raise PreconditionViolation("verifier must be callable")

        self._utxo_pool = UTXOPool(utxo_pool)
        self.verifier = verifier

    def get_utxo_pool(self) -> UTXOPool:
        """Return a copy of the current pool."""
        return UTXOPool(self._utxo_pool)

    def contains(self, utxo: UTXO) -> bool:
        return self._utxo_pool.contains(utxo)

    def get_tx_output(self, utxo: UTXO) -> Optional[TransactionOutput]:
        return self._utxo_pool.get_tx_output(utxo)

    def is_valid_tx(self, tx: Transaction) -> bool:
        """
        Check a transaction against the current pool.

        Returns True iff:
          (1) every output claimed by tx is in the current pool,
          (2) the signature on each input is valid for the claimed output's owner,
          (3) no UTXO is claimed more than once by tx,
          (4) every output value of tx is non-negative, and
          (5) the sum of input values is at least the sum of output values.

        Raises:
            PreconditionViolation: If tx is not a Transaction
        """
        return self.validate_tx(tx)[0]

    def validate_tx(self, tx: Transaction) -> Tuple[bool, Optional[str]]:
        """
        Check a transaction against the current pool, explaining rejections.

        Args:
            tx: Transaction to check

        Returns:
            Tuple of (is_valid: bool, error_message: Optional[str])

        Raises:
            PreconditionViolation: If tx is not a Transaction
            ConsistencyFault: If the claimed-UTXO bookkeeping went wrong
        """
        self._check_transaction(tx)
        return self._validate(tx)

    def _validate(self, tx: Transaction) -> Tuple[bool, Optional[str]]:
        # Sums are plain float additions, so "equal" in check 5 means equal
        # after rounding: 0.1 + 0.2 outputs overspend a 0.3 input.
        claimed: Set[UTXO] = set()
        input_sum = 0.0
        for index, tx_input in enumerate(tx.inputs):
            utxo = tx_input.utxo

            # 1) the claimed output must be unspent
            tx_out = self._utxo_pool.get_tx_output(utxo)
            if tx_out is None:
                return False, f"Input {index} claims unknown {utxo}"

            # 2) and the claim must be signed by its owner
            if tx_input.signature is None:
                return False, f"Input {index} is not signed"
            message = tx.get_raw_data_to_sign(index)
            if not self.verifier(tx_out.address, message, tx_input.signature):
                return False, f"Invalid signature on input {index}"

            # 3) and not claimed earlier in this transaction
            if utxo in claimed:
                return False, f"Input {index} claims {utxo} twice"
            claimed.add(utxo)

            input_sum += tx_out.value

        if __debug__ and len(claimed) != len(tx.inputs):
            raise ConsistencyFault(
                f"Claimed {len(claimed)} UTXOs for {len(tx.inputs)} inputs"
            )

        # 4) outputs are non-negative
        output_sum = 0.0
        for index, tx_output in enumerate(tx.outputs):
            if not tx_output.value >= 0:
                return False, f"Output {index} has negative value {tx_output.value}"
            output_sum += tx_output.value

        # 5) no value is created
        if input_sum < output_sum:
            return False, f"Output value {output_sum} exceeds input value {input_sum}"

        return True, None

    def handle_txs(self, possible_txs: Iterable[Transaction]) -> List[Transaction]:
        """
        Handle one epoch and return the committed transactions.

        Args:
            possible_txs: Candidate transactions, in iteration order

        Returns:
            List of committed transactions, in commit order
        """
        return self.handle_epoch(possible_txs).accepted

    def handle_epoch(self, possible_txs: Iterable[Transaction]) -> EpochResult:
        """
        Commit a mutually valid subset of the candidates to the pool.

        Candidates are scanned left to right, repeatedly, against the live
        pool. A valid candidate is committed on the spot, so later candidates
        in the same pass (and earlier ones in the next pass) see its outputs.
        Scanning stops after a pass that commits nothing. When candidates
        conflict, the first valid one in scan order wins.

        Args:
            possible_txs: Candidate transactions, in iteration order

        Returns:
            EpochResult describing what was committed and what was not

        Raises:
            PreconditionViolation: If possible_txs is None or holds anything
                but Transactions; nothing is committed in that case
        """
        if possible_txs is None:
            raise PreconditionViolation("handle_txs requires a sequence of transactions")
        candidates = list(possible_txs)
        for tx in candidates:
            self._check_transaction(tx)

        result = EpochResult()
        committed = [False] * len(candidates)
        reasons: Dict[int, str] = {}

        while True:
            result.passes += 1
            progress = False
            for index, tx in enumerate(candidates):
                if committed[index]:
                    continue

                valid, error = self._validate(tx)
                if not valid:
                    reasons[index] = error
                    continue

                self._commit(tx)
                committed[index] = True
                reasons.pop(index, None)
                result.accepted.append(tx)
                progress = True

            if not progress or all(committed):
                break

        result.rejected = sorted(reasons.items())
        for index, error in result.rejected:
            logger.debug(f"candidate {index} rejected: {error}")
        logger.info(
            f"epoch committed {len(result.accepted)}/{len(candidates)} "
            f"transactions in {result.passes} passes"
        )
        return result

    def _commit(self, tx: Transaction) -> None:
        """Spend tx's inputs and add its outputs to the pool."""
        tx_hash = tx.hash
        for tx_input in tx.inputs:
            self._utxo_pool.remove_utxo(tx_input.utxo)
        for index, tx_output in enumerate(tx.outputs):
            self._utxo_pool.add_utxo(UTXO(tx_hash, index), tx_output)

    @staticmethod
    def _check_transaction(tx: Transaction) -> None:
        if not isinstance(tx, Transaction):
            raise PreconditionViolation(
                f"Expected a Transaction, got {type(tx).__name__}"
            )
