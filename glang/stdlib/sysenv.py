"""Access to the program's command-line arguments."""

from __future__ import annotations

import sys
from typing import List

from glang.objects import Array, Object, String


def env_args(args: List[Object]) -> Object:
    """The command-line arguments, without the program name."""
    return Array([String(arg) for arg in sys.argv[1:]])