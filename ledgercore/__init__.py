"""Building blocks for a ledger database: caches, ordered maps, storage, codec and health."""

__version__ = "0.1.0"