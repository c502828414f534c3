"""Switch the operator's cf CLI target to a resolved org and space."""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol

from lookup_route.errors import ContextSwitchFailed

logger = logging.getLogger(__name__)


class ContextSwitcher(Protocol):
    def set_active(self, org_name: str, space_name: str) -> None:
        """Make *org_name*/*space_name* the active target or raise ContextSwitchFailed."""
        ...


class CfCliContextSwitcher:
    """Run ``cf target -o ORG -s SPACE``."""

    def __init__(self, cf_executable: str = "cf") -> None:
        self.cf_executable = cf_executable

    def command(self, org_name: str, space_name: str) -> list[str]:
        return [self.cf_executable, "target", "-o", org_name, "-s", space_name]

    def set_active(self, org_name: str, space_name: str) -> None:
        cmd = self.command(org_name, space_name)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as exc:
            raise ContextSwitchFailed(org_name, space_name, str(exc)) from exc

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()
            raise ContextSwitchFailed(org_name, space_name, detail or f"exit code {result.returncode}")
