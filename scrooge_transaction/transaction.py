"""
Implementation of the Transaction class for Scrooge Ledger.

A transaction consumes previously created outputs through its inputs and
creates new outputs. Its identity is the SHA-256 hash of its raw encoding.
"""

from typing import List, Dict, Any, Optional, Union
import hashlib
from scrooge_utxo.errors import PreconditionViolation
from scrooge_utxo.utxo import UTXO
from .codec import encode_for_signing, encode_transaction

class TransactionInput:
    """
    Represents an input to a transaction (a claim on an earlier output).

    Attributes:
        prev_tx_hash (bytes): Hash of the transaction that created the output
        output_index (int): Index of the output in that transaction
        signature (Optional[bytes]): Owner's signature, attached after signing
    """

    def __init__(self, prev_tx_hash: bytes, output_index: int, signature: Optional[bytes] = None):
        if not isinstance(prev_tx_hash, (bytes, bytearray)):
            raise PreconditionViolation("Input prev_tx_hash must be bytes")
        if isinstance(output_index, bool) or not isinstance(output_index, int):
            raise PreconditionViolation("Input output_index must be an integer")
        if output_index < 0:
            raise PreconditionViolation("Input output_index must be non-negative")
        if signature is not None and not isinstance(signature, (bytes, bytearray)):
            raise PreconditionViolation("Input signature must be bytes")

        self.prev_tx_hash = bytes(prev_tx_hash)
        self.output_index = output_index
        self.signature = bytes(signature) if signature is not None else None

    @property
    def utxo(self) -> UTXO:
        """Identifier of the output this input claims."""
        return UTXO(self.prev_tx_hash, self.output_index)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "prev_tx_hash": self.prev_tx_hash.hex(),
            "output_index": self.output_index,
            "signature": self.signature.hex() if self.signature is not None else None
        }

class TransactionOutput:
    """
    Represents an output created by a transaction. Immutable.

    Attributes:
        value (float): Amount of coins; negative values are representable but
                       never pass validation
        address (bytes): Public-key credential of the owner
    """

    __slots__ = ('_value', '_address')

    def __init__(self, value: float, address: bytes):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PreconditionViolation("Output value must be a number")
        if not isinstance(address, (bytes, bytearray)):
            raise PreconditionViolation("Output address must be bytes")

        self._value = value
        self._address = bytes(address)

    @property
    def value(self) -> float:
        return self._value

    @property
    def address(self) -> bytes:
        return self._address

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransactionOutput):
            return NotImplemented
        return self._value == other._value and self._address == other._address

    def __hash__(self) -> int:
        return hash((self._value, self._address))

    def __repr__(self) -> str:
        return f"TransactionOutput(value={self._value}, address={self._address.hex()[:16]})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "value": self._value,
            "address": self._address.hex()
        }

class Transaction:
    """
    Represents a transaction in Scrooge Ledger.

    Transactions are built incrementally: add inputs and outputs, then attach
    one signature per input over `get_raw_data_to_sign(index)`. The hash is
    never cached; it always reflects the current contents.

    Attributes:
        inputs (List[TransactionInput]): Claims on earlier outputs
        outputs (List[TransactionOutput]): New outputs being created
    """

    def __init__(
        self,
        inputs: Optional[List[TransactionInput]] = None,
        outputs: Optional[List[TransactionOutput]] = None
    ):
        """
        Initialize a new transaction.

        Args:
            inputs: Optional initial inputs
            outputs: Optional initial outputs

        Raises:
            PreconditionViolation: If any element has the wrong type
        """
        self.inputs: List[TransactionInput] = list(inputs or [])
        self.outputs: List[TransactionOutput] = list(outputs or [])

        for tx_input in self.inputs:
            if not isinstance(tx_input, TransactionInput):
                raise PreconditionViolation("Transaction inputs must be TransactionInput")
        for tx_output in self.outputs:
            if not isinstance(tx_output, TransactionOutput):
                raise PreconditionViolation("Transaction outputs must be TransactionOutput")

    def add_input(self, prev_tx_hash: bytes, output_index: int) -> TransactionInput:
        """Append an unsigned input claiming output `output_index` of `prev_tx_hash`."""
        tx_input = TransactionInput(prev_tx_hash, output_index)
        self.inputs.append(tx_input)
        return tx_input

    def add_output(self, value: float, address: bytes) -> TransactionOutput:
        """Append a new output paying `value` to `address`."""
        tx_output = TransactionOutput(value, address)
        self.outputs.append(tx_output)
        return tx_output

    def remove_input(self, target: Union[int, UTXO]) -> None:
        """
        Remove an input by position or by the UTXO it claims.

        Args:
            target: Input index, or the UTXO the input claims

        Raises:
            PreconditionViolation: If the index is out of range
        """
        if isinstance(target, UTXO):
            self.inputs = [inp for inp in self.inputs if inp.utxo != target]
            return
        self._check_input_index(target)
        del self.inputs[target]

    def add_signature(self, index: int, signature: bytes) -> None:
        """
        Attach a signature to an input.

        Args:
            index: Input index
            signature: Signature over get_raw_data_to_sign(index)

        Raises:
            PreconditionViolation: If the index is out of range or the
                signature is not bytes
        """
        self._check_input_index(index)
        if not isinstance(signature, (bytes, bytearray)):
            raise PreconditionViolation("Signature must be bytes")
        self.inputs[index].signature = bytes(signature)

    def get_input(self, index: int) -> TransactionInput:
        self._check_input_index(index)
        return self.inputs[index]

    def get_output(self, index: int) -> TransactionOutput:
        if not 0 <= index < len(self.outputs):
            raise PreconditionViolation(f"Output index {index} out of range")
        return self.outputs[index]

    def num_inputs(self) -> int:
        return len(self.inputs)

    def num_outputs(self) -> int:
        return len(self.outputs)

    def get_raw_data_to_sign(self, index: int) -> bytes:
        """
        Get the message the owner of input `index` must sign.

        Args:
            index: Input index

        Returns:
            bytes: Encoding of all inputs and outputs without signatures

        Raises:
            PreconditionViolation: If the index is out of range
        """
        self._check_input_index(index)
        return encode_for_signing(self, index)

    def get_raw_tx(self) -> bytes:
        """Get the full encoding of the transaction, signatures included."""
        return encode_transaction(self)

    @property
    def hash(self) -> bytes:
        """SHA-256 digest of the raw transaction, recomputed on every access."""
        return hashlib.sha256(self.get_raw_tx()).digest()

    def to_dict(self) -> Dict[str, Any]:
        """Convert transaction to dictionary for serialization."""
        return {
            "hash": self.hash.hex(),
            "inputs": [inp.to_dict() for inp in self.inputs],
            "outputs": [out.to_dict() for out in self.outputs]
        }

    def __repr__(self) -> str:
        return (
            f"Transaction(hash={self.hash.hex()[:16]}, "
            f"inputs={len(self.inputs)}, outputs={len(self.outputs)})"
        )

    def _check_input_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise PreconditionViolation("Input index must be an integer")
        if not 0 <= index < len(self.inputs):
            raise PreconditionViolation(f"Input index {index} out of range")
