"""
Tests for the UTXOPool class.
"""

import pytest
from scrooge_transaction.transaction import TransactionOutput
from scrooge_utxo.errors import PreconditionViolation
from scrooge_utxo.pool import UTXOPool
from scrooge_utxo.utxo import UTXO

@pytest.fixture
def pool():
    """Create a fresh UTXOPool instance for each test."""
    return UTXOPool()

@pytest.fixture
def sample_utxo():
    return UTXO(b"\x11" * 32, 0)

@pytest.fixture
def sample_output():
    return TransactionOutput(10.0, b"owner-a")

def test_pool_initialization(pool):
    """Test initial state of the pool."""
    assert pool.all_utxos() == []
    assert len(pool) == 0
    assert pool.get_total_value() == 0

def test_add_utxo(pool, sample_utxo, sample_output):
    """Test adding and looking up UTXOs."""
    pool.add_utxo(sample_utxo, sample_output)

    assert pool.contains(sample_utxo)
    assert sample_utxo in pool
    assert pool.get_tx_output(sample_utxo) == sample_output
    assert pool.get_tx_output(UTXO(b"\x11" * 32, 1)) is None
    assert not pool.contains(UTXO(b"\x11" * 32, 1))

def test_add_utxo_overwrites(pool, sample_utxo, sample_output):
    """Adding an existing identifier replaces its output."""
    pool.add_utxo(sample_utxo, sample_output)
    replacement = TransactionOutput(3.0, b"owner-b")
    pool.add_utxo(sample_utxo, replacement)

    assert len(pool) == 1
    assert pool.get_tx_output(sample_utxo) == replacement

def test_remove_utxo(pool, sample_utxo, sample_output):
    """Test removing UTXOs from the pool."""
    pool.add_utxo(sample_utxo, sample_output)
    pool.remove_utxo(sample_utxo)

    assert not pool.contains(sample_utxo)
    assert pool.get_tx_output(sample_utxo) is None

    # Removing again is harmless
    pool.remove_utxo(sample_utxo)
    assert len(pool) == 0

def test_all_utxos_is_snapshot(pool, sample_utxo, sample_output):
    """The returned list does not track later changes."""
    pool.add_utxo(sample_utxo, sample_output)
    snapshot = pool.all_utxos()
    pool.remove_utxo(sample_utxo)

    assert snapshot == [sample_utxo]
    assert pool.all_utxos() == []

def test_copy_is_independent(pool, sample_utxo, sample_output):
    """A copied pool does not share its mapping with the original."""
    pool.add_utxo(sample_utxo, sample_output)
    copied = UTXOPool(pool)
    other = UTXO(b"\x22" * 32, 0)

    copied.remove_utxo(sample_utxo)
    copied.add_utxo(other, sample_output)

    assert pool.contains(sample_utxo)
    assert not pool.contains(other)
    assert pool.copy().all_utxos() == [sample_utxo]

def test_total_value(pool):
    """Test value accounting across UTXOs."""
    for i, value in enumerate([10.0, 20.0, 30.0]):
        pool.add_utxo(UTXO(b"\x33", i), TransactionOutput(value, b"owner"))
    assert pool.get_total_value() == 60.0

def test_clear_pool(pool, sample_utxo, sample_output):
    pool.add_utxo(sample_utxo, sample_output)
    pool.clear()
    assert len(pool) == 0

def test_error_handling(pool, sample_utxo, sample_output):
    """Test pool preconditions."""
    with pytest.raises(PreconditionViolation):
        pool.add_utxo(None, sample_output)
    with pytest.raises(PreconditionViolation):
        pool.add_utxo(sample_utxo, None)
    with pytest.raises(PreconditionViolation):
        pool.contains((b"\x11" * 32, 0))
    with pytest.raises(PreconditionViolation):
        pool.get_tx_output(None)
    with pytest.raises(PreconditionViolation):
        pool.remove_utxo("not-a-utxo")
    with pytest.raises(PreconditionViolation):
        UTXOPool({})

    # Membership tests stay lenient
    assert None not in pool
