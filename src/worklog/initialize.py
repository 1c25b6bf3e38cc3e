# SPDX-License-Identifier: MIT

from worklog import configuration
from worklog.logger import configure_logging
from worklog.repository.configuration import CONFIGURATION_REPO
from worklog.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    # Writes the defaults for a missing config file or missing keys
    config = CONFIGURATION_REPO.get_config()
    CONFIGURATION_REPO.flush()

    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])
