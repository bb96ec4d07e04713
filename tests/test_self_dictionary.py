import pytest

from ledgercore.errors import LedgerError
from ledgercore.self_dictionary import SelfDictionary
from ledgercore.unique import Unique

PARAMS = [3, 5, 11, 23, 17, 10, 12]


class Entry(Unique):
    def __init__(self, ident, payload=None):
        self.ident = ident
        self.payload = payload

    def unique_key(self):
        return self.ident


@pytest.fixture(scope="module")
def shared():
    return SelfDictionary()


@pytest.mark.parametrize("n", PARAMS)
def test_add(shared, n):
    entry = Entry(n)
    if n % 2:
        shared.add(entry)
        assert n in shared
    else:
        shared.add(entry)
        assert n in shared
        with pytest.raises(LedgerError) as info:
            shared.add(entry)
        assert info.value.message == "Duplicate key"


@pytest.mark.parametrize("n", PARAMS)
def test_remove(shared, n):
    entry = Entry(n)
    if n % 2:
        shared.remove(entry)
        assert n not in shared
    else:
        shared.remove(entry)
        assert n not in shared
        with pytest.raises(LedgerError) as info:
            shared.remove(entry)
        assert info.value.message == "Key not found"


def test_remove_by_key():
    d = SelfDictionary()
    d.add(Entry(7))
    d.remove(7)
    assert len(d) == 0
    with pytest.raises(LedgerError):
        d.remove(7)


def test_update_replaces_and_requires_existing():
    d = SelfDictionary()
    with pytest.raises(LedgerError) as info:
        d.update(Entry(1, "a"))
    assert info.value.message == "Key not found"
    d.add(Entry(1, "a"))
    d.update(Entry(1, "b"))
    assert d.get(1).payload == "b"
    assert len(d) == 1


def test_get_missing_returns_none():
    d = SelfDictionary()
    assert d.get(99) is None


def test_iteration_in_key_order():
    d = SelfDictionary()
    for n in PARAMS:
        d.add(Entry(n))
    assert [e.unique_key() for e in d] == sorted(PARAMS)
    assert len(d) == len(PARAMS)