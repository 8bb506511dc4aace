# SPDX-License-Identifier: MIT

from progress_tracker.cleanup import register_cleanup
from progress_tracker.initialize import initialize
from progress_tracker.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
