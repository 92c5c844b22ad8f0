"""Shared utilities for cardgen."""

from cardgen.utils.exit_codes import ExitCode
from cardgen.utils.json_norm import stable_json_dump, stable_json_dumps, to_builtin

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
    "to_builtin",
]
