# SPDX-License-Identifier: MIT

from typing import Any, Optional, TypedDict

# Field names follow the export file format, not the Python models
AppData = TypedDict(
    "AppData",
    {
        "version": int,
        "activeTracker": Optional[dict[str, Any]],
        "history": list[dict[str, Any]],
    },
)

DATA_FORMAT_VERSION = 1
