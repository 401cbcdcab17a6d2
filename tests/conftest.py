"""
Shared fixtures: fake storage, document store, deterministic ids and the
three services wired over them.
"""

import pytest

from application.services import AccountService, EntryService, TransferService
from infrastructure.security import sha256_hex
from tests.fakes import FakeKeyValueStorage, SequentialIds, create_store

PASSWORD = "secret1"


@pytest.fixture
def storage() -> FakeKeyValueStorage:
    """Fresh fake slot storage."""
    return FakeKeyValueStorage()


@pytest.fixture
def store(storage):
    """Document store over the fake storage."""
    return create_store(storage)


@pytest.fixture
def user_ids() -> SequentialIds:
    return SequentialIds(prefix="user")


@pytest.fixture
def entry_ids() -> SequentialIds:
    return SequentialIds(prefix="entry")


@pytest.fixture
def accounts(store, user_ids) -> AccountService:
    return AccountService(store=store, digest=sha256_hex, new_id=user_ids)


@pytest.fixture
def entries(store, entry_ids) -> EntryService:
    return EntryService(store=store, new_id=entry_ids)


@pytest.fixture
def transfer(store) -> TransferService:
    return TransferService(store=store, new_id=SequentialIds(prefix="merged"))


@pytest.fixture
def password_hash() -> str:
    return sha256_hex(PASSWORD)


@pytest.fixture
def alex(accounts, password_hash):
    """A registered (and logged in) user."""
    return accounts.register(
        name="Alex",
        email="a@x.com",
        password_hash=password_hash,
        age=30,
        height=180,
        weight=75,
        goals={"pushups": 20, "situps": 20, "run_m": 1000},
    )
