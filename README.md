# ledgercore

Building blocks for a ledger database, each usable on its own.

## Modules

- `ledgercore.errors`: `LedgerError`, an exception identified by its
  message (two errors with the same message compare equal, and an error also
  compares equal to the matching `ErrorKind`). `LedgerError.of(kind)` builds
  the error for one of the `ErrorKind` members such as `REPEAT_KEY`,
  `INVALID_KEY`, `UN_LEADER` or `RAFT_ERROR`. `str()` gives `Error:<message>`.
- `ledgercore.lru`: `LRUCache(capacity)` with `get`, `put`, `len()` and `in`.
  `get` returns `None` for a missing key; when a new key pushes the cache over
  capacity, the least recently used entry is evicted. A capacity below 1
  raises `ValueError`.
- `ledgercore.skiplist`: `SkipList(max_level=32, rng=None)`, an ordered map
  with `insert` (overwrites an existing key), `find` (value or `None`),
  `remove` (returns whether the key was present), `len()`, `in`, and
  iteration over keys in ascending order. Pass a `random.Random` as `rng` for
  reproducible level choices.
- `ledgercore.unique`: `Unique`, an abstract base whose subclasses implement
  `unique_key()`; instances are ordered by that key with `<`, `>`, `<=`, `>=`.
- `ledgercore.self_dictionary`: `SelfDictionary`, which files `Unique`
  objects under their own key. `add` raises `LedgerError("Duplicate key")` for
  a key already present; `update` and `remove` raise
  `LedgerError("Key not found")` for an absent key. `remove` takes either the
  object or its key. Iteration yields the values in key order.
- `ledgercore.config`: `Config(path)` reads a file of `[section]` headers and
  `key = value` lines (`#` and `;` start comment lines). `get(configurable,
  key, kind=str)` reads a key from the section named by a `Configurable`'s
  `field()` (or by a plain section name) and converts it to `int`, `float`,
  `bool` or `str`; a missing key reads as `0`, `0.0`, `False` or `""`.
  `Config.instance()` returns one shared configuration loaded from
  `config.default.conf` in the current directory. A file that cannot be read
  raises `LedgerError`.
- `ledgercore.strategy`: `Strategy(name, roles)`; `passes(role)` is true when
  `role` equals one of the roles and has the same type.
- `ledgercore.storage`: the interfaces `ReadOnlyStore`, `Storage`,
  `SoftStorage` (whose `delete_key` raises `NotImplementedError`) and
  `Transaction`, and `PersistenceStore(path, family="default")`, a
  key-value store kept in an SQLite file `store.sqlite3` inside the directory
  `path`, with one table per family. `save` refuses an existing key,
  `save_many` writes all pairs in one transaction and overwrites existing
  keys, `load` and `update_key` raise `LedgerError` for an absent key, and
  `delete_key` of an absent key does nothing. It is a context manager;
  `close()` releases the database and later calls raise `LedgerError`.
- `ledgercore.store_creator`: `StoreCreator`, an abstract helper whose
  subclasses implement `create()` to return a `Storage`. `store(obj)` saves
  `obj.serialize()` under the key `<prefix>_<unique_key>_<suffix>`;
  `load(unique)` returns the stored text, or `None` when storage is
  unavailable or the key is missing.
- `ledgercore.codec`: framing of protobuf messages as
  `len | nameLen | typeName NUL | payload | adler32`, all integers big-endian.
  `encode_message` builds a whole frame, `parse_frame` decodes a frame body
  (everything after the length prefix) and raises `CodecError` carrying a
  `CodecErrorCode`, and `create_message` builds an empty message of a type
  registered in the default descriptor pool. `ProtobufCodec(on_message,
  on_error=None)` accepts bytes as they arrive through `feed`, calls
  `on_message` for every complete frame and `on_error` for a malformed one;
  `pending()` counts the bytes not yet consumed. The default error handler
  logs and calls `shutdown()` on a connected connection object.
- `ledgercore.dispatcher`: `ProtobufDispatcher(default_callback)` routes a
  decoded message to the callback registered for its type with `register`
  or `register_descriptor`, and to the default callback otherwise.
- `ledgercore.health`: `HealthCheckService` keeps a `ServingStatus` per
  service. `check` raises `ServiceNotFoundError` for an unknown service,
  `watch` is a generator that yields the status whenever it changes until a
  cancellation function returns true, `set_all` updates every known service,
  and after `shutdown()` every service reads `NOT_SERVING`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

A least-recently-used cache:

```python
from ledgercore.lru import LRUCache

cache = LRUCache(2)
cache.put("a", 1)
cache.put("b", 2)
cache.get("a")        # 1, and "a" is now the most recent entry
cache.put("c", 3)     # evicts "b"
"b" in cache          # False
```

Objects that key themselves:

```python
from ledgercore.self_dictionary import SelfDictionary
from ledgercore.unique import Unique


class Account(Unique):
    def __init__(self, number):
        self.number = number

    def unique_key(self):
        return self.number


accounts = SelfDictionary()
accounts.add(Account(7))
7 in accounts         # True
accounts.remove(7)
```

A persistent store:

```python
from ledgercore.storage import PersistenceStore

with PersistenceStore("/tmp/ledger-store", family="accounts") as store:
    store.save("alice", "100")
    store.update_key("alice", "120")
    store.load("alice")   # "120"
```

Framing a protobuf message and reading it back:

```python
from google.protobuf.wrappers_pb2 import StringValue
from ledgercore.codec import encode_message, parse_frame

frame = encode_message(StringValue(value="hello"))
message = parse_frame(frame[4:])   # skip the 4-byte length prefix
message.value                      # "hello"
```

## What this package does not do

It has no network server, no client and no command-line program: the codec
and dispatcher work on bytes and objects handed to them, and opening
connections is left to the caller. It does not replicate data between nodes
or elect a leader, and it has no ledger service; the storage it offers is a
single local SQLite file per store directory.