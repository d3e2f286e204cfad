"""Build identification.

``COMMIT_HASH`` and ``REVISION`` are plain module constants.  A release
build overwrites these two assignments before packaging; nothing is looked
up at runtime.
"""

from __future__ import annotations

import platform

COMMIT_HASH = "<not set>"
REVISION = "<not set>"


def version_string() -> str:
    return (
        f"pubsubc - build {REVISION} ({COMMIT_HASH}) "
        f"running on Python {platform.python_version()}"
    )
