from pathlib import Path

import pytest

from worklog import configuration
from worklog.core import Worklog
from worklog.repository.configuration import CONFIGURATION_REPO
from worklog.repository.gateway import PersistenceGateway
from worklog.repository.storage import InMemoryStorage


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def gateway(storage: InMemoryStorage) -> PersistenceGateway:
    return PersistenceGateway(storage)


@pytest.fixture
def worklog(gateway: PersistenceGateway) -> Worklog:
    return Worklog(gateway)


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration and data paths at a temporary directory."""
    data_path = tmp_path / "data"
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return data_path
