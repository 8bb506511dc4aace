# SPDX-License-Identifier: MIT

from progress_tracker.configuration import Configuration


def get_configuration_template() -> Configuration:
    return {
        "data_path": None,
        "log_display_limit": 5,
        "log_level": "WARNING",
        "show_header": True,
    }
