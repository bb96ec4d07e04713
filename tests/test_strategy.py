from enum import Enum

from ledgercore.strategy import Strategy


class LedgerRole(Enum):
    OWNER = 1
    REGULATOR = 2
    COMMON = 3
    READONLY = 4


class UserRole(Enum):
    DBA = 1
    COMMON = 2


def test_name_is_kept():
    assert Strategy("Write", [LedgerRole.OWNER]).name == "Write"


def test_accepted_role_passes():
    verify = Strategy(
        "Verify",
        [LedgerRole.OWNER, LedgerRole.REGULATOR, LedgerRole.COMMON, LedgerRole.READONLY],
    )
    assert all(verify.passes(role) for role in LedgerRole)


def test_other_role_is_refused():
    write = Strategy("Write", [LedgerRole.OWNER])
    assert write.passes(LedgerRole.OWNER) is True
    assert write.passes(LedgerRole.COMMON) is False


def test_role_of_other_type_is_refused():
    create_user = Strategy("CreateUser", [UserRole.DBA])
    assert create_user.passes(LedgerRole.OWNER) is False
    assert create_user.passes(1) is False


def test_missing_role_is_refused():
    assert Strategy("Grant", [LedgerRole.OWNER]).passes(None) is False


def test_no_roles_refuses_everything():
    assert Strategy("Nothing", []).passes(LedgerRole.OWNER) is False