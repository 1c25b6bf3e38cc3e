# SPDX-License-Identifier: MIT

from worklog.initialize import initialize
from worklog.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
