"""Error type shared by the ledger components."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Well-known error conditions and the message each one carries."""

    INVALID_LEDGER = "InvalidLedger"
    MERKLE_TREE_UPDATE_ERROR = "MerkleTreeUpdateError"
    INVALID_MERKLE_TREE = "InvalidMerkleTree"
    SERIALIZE_ERROR = "SerializeError"
    DESERIALIZE_ERROR = "DeserializeError"
    HASH_ERROR = "HashError"
    UN_LEADER = "Leader unavailable"
    REDIRECT = "redirect"
    RAFT_ERROR = "RaftError"
    UNDEFINED_GRAMMAR = "Undefine Gammar"
    REPEAT_KEY = "Repeat Key Exist"
    INVALID_KEY = "Invalid Key"
    INVALID_VALUE = "Invalid Value"
    INVALID_TYPE = "Invalid Type"


class LedgerError(Exception):
    """An error identified by its message; equal errors have equal messages."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def of(cls, kind: ErrorKind) -> "LedgerError":
        """Build the error for a well-known condition."""
        return cls(kind.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LedgerError):
            return self.message == other.message
        if isinstance(other, ErrorKind):
            return self.message == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.message)

    def __str__(self) -> str:
        return f"Error:{self.message}"