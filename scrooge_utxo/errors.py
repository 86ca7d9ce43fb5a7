"""
Exception types shared by the Scrooge Ledger packages.

Invalid transactions are never reported through these exceptions; they are
rejected by returning False from validation. These types are reserved for
callers breaking their contract and for defects in the validator itself.
"""


class PreconditionViolation(ValueError):
    """Raised when a caller passes malformed or absent input."""


class ConsistencyFault(RuntimeError):
    """Raised when an internal invariant of the validator does not hold."""
