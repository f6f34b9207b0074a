from functools import lru_cache
import logging
import os
import sys
from typing import Any, Dict

from rich.console import Console
from rich.theme import Theme


LOG = logging.getLogger(__name__)


@lru_cache()
def should_use_ascii():
    """
    Check if we should use ASCII alternatives for symbols
    """
    encoding = (getattr(sys.stdout, "encoding", None) or "").lower()

    if encoding in {"utf-8", "utf8", "cp65001", "utf-8-sig"}:
        return False

    return True


def check_mark() -> str:
    return "+" if should_use_ascii() else "✔"


LIGEN_THEME = {
    "license_type": "bold cyan on default",
    "license_title": "bold default on default",
    "holder": "bold yellow on default",
    "year": "bold cyan on default",
    "path": "underline default on default",
    "best_score": "bold green on default",
    "low_score": "dim default on default",
    "success": "bold green on default",
}


non_interactive = os.getenv("NON_INTERACTIVE") == "1"

console_kwargs: Dict[str, Any] = {
    "theme": Theme(LIGEN_THEME, inherit=True),
    "emoji": not should_use_ascii(),
}

if non_interactive:
    LOG.info(
        "NON_INTERACTIVE environment variable is set, forcing non-interactive mode"
    )
    console_kwargs["force_terminal"] = True
    console_kwargs["force_interactive"] = False

main_console = Console(**console_kwargs)
