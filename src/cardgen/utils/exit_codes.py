"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success: every requested card rendered
  1   Violation: some cards failed, or a schema check failed
  2   Error: usage error, missing file, unusable payload
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
