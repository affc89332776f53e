"""Settings and store selection tests."""

import pytest

from proposal_studio.config import Settings, StorageMode
from proposal_studio.services import DemoStore, LocalStore, RemoteStore, create_store


class TestResolvedStorageMode:
    def test_defaults_to_demo(self):
        assert Settings(_env_file=None).resolved_storage_mode == StorageMode.DEMO

    def test_remote_without_url_is_demo(self):
        settings = Settings(_env_file=None, storage_mode=StorageMode.REMOTE, remote_base_url="  ")
        assert settings.resolved_storage_mode == StorageMode.DEMO

    def test_remote_with_url(self):
        settings = Settings(_env_file=None, storage_mode="remote", remote_base_url="https://x.test/api/v1")
        assert settings.resolved_storage_mode == StorageMode.REMOTE

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("STORAGE_MODE", "local")
        monkeypatch.setenv("PROPOSAL_RETENTION_DAYS", "14")
        settings = Settings(_env_file=None)
        assert settings.storage_mode == StorageMode.LOCAL
        assert settings.proposal_retention_days == 14


class TestCreateStore:
    def test_demo(self):
        assert isinstance(create_store(Settings(_env_file=None)), DemoStore)

    def test_local(self, tmp_path):
        settings = Settings(_env_file=None, storage_mode="local", local_store_path=str(tmp_path / "s"))
        store = create_store(settings)
        assert isinstance(store, LocalStore)
        assert store.base_path == tmp_path / "s"

    async def test_remote(self):
        settings = Settings(_env_file=None, storage_mode="remote", remote_base_url="https://x.test/api/v1/")
        store = create_store(settings)
        assert isinstance(store, RemoteStore)
        assert store.base_url == "https://x.test/api/v1"
        await store.close()

    def test_incomplete_remote_falls_back_with_warning(self, caplog):
        settings = Settings(_env_file=None, storage_mode="remote", remote_base_url="")
        with caplog.at_level("WARNING"):
            store = create_store(settings)
        assert isinstance(store, DemoStore)
        assert "falling back" in caplog.text


@pytest.mark.parametrize("mode", list(StorageMode))
def test_store_mode_matches_settings(mode, tmp_path):
    settings = Settings(
        _env_file=None,
        storage_mode=mode,
        remote_base_url="https://x.test" if mode == StorageMode.REMOTE else "",
        local_store_path=str(tmp_path),
    )
    assert create_store(settings).mode == mode
