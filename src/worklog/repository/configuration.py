# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from worklog import configuration

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        self._config = configuration.default_configuration()
        if isinstance(loaded, dict):
            # Keys missing from older config files keep their defaults
            for key in self._config:
                if key in loaded:
                    self._config[key] = loaded[key]  # type: ignore[literal-required]
            if loaded.keys() != self._config.keys():
                self.is_dirty = True
        else:
            self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        if log_level is not None and log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{log_level}'")

        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level.upper()

        self.flush()


CONFIGURATION_REPO = ConfigurationRepository()
