from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import text

from app.core.database import Database
from app.core.exceptions import ConflictError, FatalStartupError, StorageError
from app.models import Faucet, FaucetFilters, FaucetSubmission
from app.repositories import FaucetRepository


def _submission(url: str, **fields) -> FaucetSubmission:
    return FaucetSubmission(name=fields.pop("name", "Test Faucet"), url=url, **fields)


def test_open_creates_missing_directory(database, db_path):
    assert db_path.parent.is_dir()
    assert database.is_open


def test_open_fails_when_directory_cannot_be_created(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    db = Database(f"sqlite:///{blocker / 'faucets.db'}")
    with pytest.raises(FatalStartupError):
        db.open()
    assert not db.is_open


def test_insert_assigns_increasing_ids(repository):
    first = repository.insert(_submission("https://a.example"))
    second = repository.insert(_submission("https://b.example"))
    assert second > first


def test_insert_forces_review_state(repository, database):
    faucet_id = repository.insert(_submission("https://a.example"))
    with database.session_scope() as session:
        row = session.get(Faucet, faucet_id)
        assert row.status == "under_review"
        assert row.is_verified is False
        assert row.date_added is not None
        assert row.last_updated == row.date_added


def test_duplicate_url_raises_conflict(repository, database, count_rows):
    repository.insert(_submission("https://dup.example"))
    with pytest.raises(ConflictError):
        repository.insert(_submission("https://dup.example", name="Other"))
    assert count_rows(database) == 1


def test_concurrent_duplicate_submissions(repository, database, count_rows):
    def attempt(_):
        try:
            return repository.insert(_submission("https://race.example"))
        except ConflictError:
            return None

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(8)))

    assert len([r for r in results if r is not None]) == 1
    assert count_rows(database) == 1


def test_not_null_violation_is_storage_error(repository):
    with pytest.raises(StorageError) as exc_info:
        repository.insert(FaucetSubmission(name=None, url="https://x.example"))
    assert not isinstance(exc_info.value, ConflictError)


def test_query_excludes_unverified(repository):
    hidden = repository.insert(_submission("https://hidden.example", token_symbol="ETH"))
    shown = repository.insert(_submission("https://shown.example", token_symbol="ETH"))
    repository.mark_verified(shown)

    ids = [f.id for f in repository.query(FaucetFilters())]
    assert ids == [shown]
    assert hidden not in [f.id for f in repository.query(FaucetFilters(token_symbol="ETH"))]
    assert repository.query(FaucetFilters(status="under_review")) == []


def test_query_combines_filters_with_and(repository):
    a = repository.insert(_submission("https://a.example", token_symbol="ETH", network="main"))
    b = repository.insert(_submission("https://b.example", token_symbol="ETH", network="test"))
    c = repository.insert(_submission("https://c.example", token_symbol="BTC", network="main"))
    for faucet_id in (a, b, c):
        repository.mark_verified(faucet_id)

    result = repository.query(FaucetFilters(token_symbol="ETH", network="main"))
    assert [f.id for f in result] == [a]

    eth = repository.query(FaucetFilters(token_symbol="ETH"))
    assert sorted(f.id for f in eth) == sorted([a, b])


def test_query_is_case_sensitive(repository):
    faucet_id = repository.insert(_submission("https://a.example", token_symbol="ETH"))
    repository.mark_verified(faucet_id)
    assert repository.query(FaucetFilters(token_symbol="eth")) == []


def test_mark_verified_unknown_id(repository):
    assert repository.mark_verified(9999) is False


def test_ensure_schema_is_idempotent(repository, database):
    faucet_id = repository.insert(_submission("https://keep.example"))
    repository.mark_verified(faucet_id)

    assert database.ensure_schema() is True
    assert database.ensure_schema() is True

    rows = repository.query(FaucetFilters())
    assert [f.url for f in rows] == ["https://keep.example"]


def test_reopening_existing_store_keeps_rows(test_config, repository):
    faucet_id = repository.insert(_submission("https://persist.example"))
    repository.mark_verified(faucet_id)

    other = Database(test_config.get_database_url())
    other.open()
    try:
        assert other.ensure_schema() is True
        rows = FaucetRepository(other).query(FaucetFilters())
        assert [f.id for f in rows] == [faucet_id]
    finally:
        other.close()


def test_ensure_schema_failure_is_swallowed(test_config):
    db = Database(test_config.get_database_url())
    # 未打开的数据库无法建表
    assert db.ensure_schema() is False


@pytest.mark.parametrize(
    "stored",
    ["2024-05-01 10:00:00.123", "2024-05-01T10:00:00Z", "yesterday"],
)
def test_query_returns_timestamps_as_stored(repository, database, stored):
    faucet_id = repository.insert(_submission("https://ts.example"))
    with database.session_scope() as session:
        session.execute(
            text("UPDATE faucets SET is_verified = 1, last_updated = :stored WHERE id = :id"),
            {"stored": stored, "id": faucet_id},
        )

    (faucet,) = repository.query(FaucetFilters())
    assert faucet.last_updated == stored


def test_query_wraps_unexpected_errors(repository, monkeypatch):
    faucet_id = repository.insert(_submission("https://bad.example"))
    repository.mark_verified(faucet_id)

    class BrokenRead:
        @staticmethod
        def model_validate(row):
            raise ValueError("unreadable row")

    monkeypatch.setattr("app.repositories.faucet_repository.FaucetRead", BrokenRead)
    with pytest.raises(StorageError) as exc_info:
        repository.query(FaucetFilters())
    assert "unreadable row" in exc_info.value.message
