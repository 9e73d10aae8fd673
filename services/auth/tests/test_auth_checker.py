from dataclasses import dataclass
from uuid import UUID, uuid4

import pytest

from tinybugs_auth.exceptions import UserLookupError
from tinybugs_auth.models.enums import UserRole
from tinybugs_auth.models.user import User
from tinybugs_auth.services.auth_checker import AuthChecker, rank_role_check
from tinybugs_auth.services.credentials import create_credential


@dataclass
class FakeUser:
    id: UUID
    salt: str
    password_hash: str
    role: str = UserRole.USER


class FakeStore:
    def __init__(self, *credentials):
        self.users = {c.username: FakeUser(id=c.id, salt=c.salt, password_hash=c.password_hash) for c in credentials}
        self.username_lookups: list[str] = []

    def find_by_username(self, username):
        self.username_lookups.append(username)
        return self.users.get(username)

    def find_by_id(self, user_id):
        return next((u for u in self.users.values() if u.id == user_id), None)


class BrokenStore:
    def find_by_username(self, username):
        raise UserLookupError()

    def find_by_id(self, user_id):
        raise UserLookupError()


def test_authenticate_with_correct_password():
    credential = create_credential("alice@example.com", "hunter2", username="alice")
    checker = AuthChecker(FakeStore(credential))

    ok, user = checker.authenticate_by_credentials("alice", "hunter2")

    assert ok
    assert user.id == credential.id


def test_authenticate_normalizes_username():
    credential = create_credential("alice@example.com", "hunter2", username="alice")
    store = FakeStore(credential)

    ok, _ = AuthChecker(store).authenticate_by_credentials("ALICE", "hunter2")

    assert ok
    assert store.username_lookups == ["alice"]


def test_authenticate_with_wrong_password():
    credential = create_credential("alice@example.com", "hunter2", username="alice")

    ok, _ = AuthChecker(FakeStore(credential)).authenticate_by_credentials("alice", "hunter3")

    assert not ok


def test_authenticate_unknown_user():
    ok, user = AuthChecker(FakeStore()).authenticate_by_credentials("nobody", "hunter2")

    assert not ok
    assert user is None


def test_authenticate_empty_username_looks_up_empty_string():
    store = FakeStore()

    ok, user = AuthChecker(store).authenticate_by_credentials(None, "pw")

    assert not ok
    assert user is None
    assert store.username_lookups == [""]


def test_authenticate_store_failure_propagates():
    checker = AuthChecker(BrokenStore())

    with pytest.raises(UserLookupError):
        checker.authenticate_by_credentials("alice", "hunter2")
    with pytest.raises(UserLookupError):
        checker.authenticate_by_id(uuid4())


def test_authenticate_by_id():
    credential = create_credential("alice@example.com", "hunter2")
    checker = AuthChecker(FakeStore(credential))

    ok, user = checker.authenticate_by_id(credential.id)
    assert ok
    assert user.id == credential.id

    ok, user = checker.authenticate_by_id(uuid4())
    assert not ok
    assert user is None


def test_authorize_delegates_to_role_check():
    calls = []

    def role_check(user, role):
        calls.append((user, role))
        return role == "admin"

    checker = AuthChecker(FakeStore(), role_check=role_check)

    assert checker.authorize("u", "admin")
    assert not checker.authorize("u", "user")
    assert calls == [("u", "admin"), ("u", "user")]


def test_default_role_check_uses_role_ranks():
    admin = User(role=UserRole.ADMIN)
    contributor = FakeUser(id=uuid4(), salt="", password_hash="", role=UserRole.CONTRIBUTOR)
    checker = AuthChecker(FakeStore())

    assert checker.authorize(admin, UserRole.CONTRIBUTOR)
    assert checker.authorize(contributor, UserRole.USER)
    assert not checker.authorize(contributor, UserRole.ADMIN)
    assert not rank_role_check(User(role=UserRole.USER), "admin")


@pytest.mark.parametrize("required", ["superadmin", "admn", "", None])
def test_default_role_check_refuses_unknown_role(required):
    checker = AuthChecker(FakeStore())

    assert not checker.authorize(User(role=UserRole.ADMIN), required)
    assert not checker.authorize(FakeUser(id=uuid4(), salt="", password_hash="", role=UserRole.ADMIN), required)


def test_unknown_stored_role_ranks_lowest():
    checker = AuthChecker(FakeStore())
    legacy = FakeUser(id=uuid4(), salt="", password_hash="", role="legacy")

    assert checker.authorize(legacy, UserRole.USER)
    assert not checker.authorize(legacy, UserRole.CONTRIBUTOR)


def test_authenticate_with_malformed_stored_credential():
    credential = create_credential("alice@example.com", "hunter2", username="alice")
    store = FakeStore(credential)
    checker = AuthChecker(store)

    store.users["alice"].salt = "!!!"
    assert not checker.authenticate_by_credentials("alice", "hunter2")[0]

    store.users["alice"].salt = credential.salt
    store.users["alice"].password_hash = "ハッシュ"
    assert not checker.authenticate_by_credentials("alice", "hunter2")[0]
