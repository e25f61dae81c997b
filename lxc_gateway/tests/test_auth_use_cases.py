from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import UTC, datetime, timedelta

import pytest

from lxc_gateway.application.services.password_hashing import WerkzeugPasswordHasher
from lxc_gateway.application.use_cases.users import LogInUseCase, SignUpUseCase
from lxc_gateway.domain.users.entities import CredentialRecord, IssuedToken, SessionClaims
from lxc_gateway.domain.users.exceptions import InvalidCredentialsError, UsernameTakenError
from lxc_gateway.domain.users.repositories import CredentialStore, PasswordHasher, TokenService


class InMemoryCredentialStore(CredentialStore):
    def __init__(self) -> None:
        self.records: list[CredentialRecord] = []
        self.saves = 0

    def load(self) -> list[CredentialRecord]:
        return list(self.records)

    def save(self, records: Sequence[CredentialRecord]) -> None:
        self.records = list(records)
        self.saves += 1

    @contextmanager
    def locked(self) -> Iterator[None]:
        yield


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verified: list[tuple[str, str]] = []

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verified.append((password, hashed))
        return hashed == f"hashed:{password}"


class StubTokenService(TokenService):
    def issue(self, username: str, *, now: datetime | None = None) -> IssuedToken:
        issued_at = now or datetime.now(UTC)
        return IssuedToken(
            token=f"token-{username}",
            username=username,
            issued_at=issued_at,
            expires_at=issued_at + timedelta(hours=1),
        )

    def decode(self, token: str) -> SessionClaims:  # pragma: no cover
        raise NotImplementedError


@pytest.fixture()
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


def test_sign_up_success_stores_hash_not_password(
    store: InMemoryCredentialStore, hasher: DeterministicHasher
) -> None:
    SignUpUseCase(store=store, password_hasher=hasher).execute("alice", "pw1")

    assert store.records == [CredentialRecord(username="alice", password_hash="hashed:pw1")]
    assert store.saves == 1


def test_sign_up_duplicate_raises_regardless_of_password(
    store: InMemoryCredentialStore, hasher: DeterministicHasher
) -> None:
    use_case = SignUpUseCase(store=store, password_hasher=hasher)
    use_case.execute("alice", "pw1")

    with pytest.raises(UsernameTakenError):
        use_case.execute("alice", "pw2")

    assert len(store.records) == 1


def test_sign_up_usernames_are_case_sensitive(
    store: InMemoryCredentialStore, hasher: DeterministicHasher
) -> None:
    use_case = SignUpUseCase(store=store, password_hasher=hasher)
    use_case.execute("alice", "pw1")
    use_case.execute("Alice", "pw1")

    assert [r.username for r in store.records] == ["alice", "Alice"]


def test_sign_up_rechecks_under_lock(hasher: DeterministicHasher) -> None:
    class RacingStore(InMemoryCredentialStore):
        """Another writer lands the same username between the pre-check and the lock."""

        @contextmanager
        def locked(self) -> Iterator[None]:
            self.records.append(CredentialRecord(username="alice", password_hash="other"))
            yield

    store = RacingStore()

    with pytest.raises(UsernameTakenError):
        SignUpUseCase(store=store, password_hasher=hasher).execute("alice", "pw1")

    assert store.saves == 0


def test_log_in_success_returns_token(
    store: InMemoryCredentialStore, hasher: DeterministicHasher
) -> None:
    SignUpUseCase(store=store, password_hasher=hasher).execute("alice", "pw1")
    login = LogInUseCase(store=store, password_hasher=hasher, tokens=StubTokenService())

    issued = login.execute("alice", "pw1")

    assert issued.token == "token-alice"
    assert issued.lifetime_seconds == 3600


def test_log_in_wrong_password_and_unknown_user_are_indistinguishable(
    store: InMemoryCredentialStore, hasher: DeterministicHasher
) -> None:
    SignUpUseCase(store=store, password_hasher=hasher).execute("alice", "pw1")
    login = LogInUseCase(
        store=store, password_hasher=hasher, tokens=StubTokenService(), dummy_hash="hashed:dummy"
    )

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute("mallory", "wrong")

    assert wrong_password.value.to_dict() == unknown_user.value.to_dict()
    assert wrong_password.value.status == unknown_user.value.status
    assert ("wrong", "hashed:dummy") in hasher.verified


def test_werkzeug_hasher_salts_every_hash() -> None:
    hasher = WerkzeugPasswordHasher()

    first = hasher.hash("pw1")
    second = hasher.hash("pw1")

    assert first != second
    assert "pw1" not in first
    assert first.startswith("scrypt:")
    assert hasher.verify("pw1", first)
    assert hasher.verify("pw1", second)
    assert not hasher.verify("pw2", first)


def test_werkzeug_hasher_rejects_garbage_hash() -> None:
    assert WerkzeugPasswordHasher().verify("pw1", "not-a-hash") is False
