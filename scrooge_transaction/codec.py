"""
Deterministic byte encoding of transactions for Scrooge Ledger.

Every field is rendered as text and the parts are joined with "|" before UTF-8
encoding, the same way identifiers are hashed elsewhere in the ledger:

  header    = "<num_inputs>:<num_outputs>"
  input     = "<prev_tx_hash hex>:<output_index>[:<signature hex>]"
  output    = "<value>:<address hex>"

Values are rendered exactly: ints in decimal, floats as float.hex(), so two
different amounts never share an encoding.

The signing form leaves every signature out, since a signature cannot cover
itself, and appends the index of the input being signed.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .transaction import Transaction, TransactionInput, TransactionOutput


def encode_input(tx_input: 'TransactionInput', include_signature: bool = True) -> str:
    """
    Encode one input.

    Args:
        tx_input: Input to encode
        include_signature: Whether to append the signature field

    Returns:
        str: Text form of the input
    """
    text = f"{tx_input.prev_tx_hash.hex()}:{tx_input.output_index}"
    if include_signature:
        signature = tx_input.signature or b""
        text += f":{signature.hex()}"
    return text


def encode_value(value: float) -> str:
    """Encode an amount without rounding."""
    if isinstance(value, float):
        return value.hex()
    return str(value)


def encode_output(tx_output: 'TransactionOutput') -> str:
    """Encode one output."""
    return f"{encode_value(tx_output.value)}:{tx_output.address.hex()}"


def _encode(tx: 'Transaction', include_signatures: bool) -> List[str]:
    parts = [f"{len(tx.inputs)}:{len(tx.outputs)}"]
    parts.extend(encode_input(inp, include_signatures) for inp in tx.inputs)
    parts.extend(encode_output(out) for out in tx.outputs)
    return parts


def encode_for_signing(tx: 'Transaction', index: int) -> bytes:
    """
    Encode the bytes an input's owner signs.

    Covers every input reference and every output, but no signature.

    Args:
        tx: Transaction being signed
        index: Index of the input the signature is for

    Returns:
        bytes: Message to sign or verify
    """
    parts = _encode(tx, include_signatures=False)
    parts.append(f"sign:{index}")
    return "|".join(parts).encode("utf-8")


def encode_transaction(tx: 'Transaction') -> bytes:
    """
    Encode the full transaction, signatures included.

    Returns:
        bytes: Raw transaction, the input of the transaction hash
    """
    return "|".join(_encode(tx, include_signatures=True)).encode("utf-8")
