"""Token resolver backed by ``gh auth token``."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from issuelens.auth.base import TokenResolver
from issuelens.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class GhCliTokenResolver(TokenResolver):
    """Borrows the token the GitHub CLI already holds for ``hostname``."""

    hostname: str = "github.com"

    async def resolve(self) -> str:
        stdout = await self._gh_auth_token()
        token = stdout.strip()
        if not token:
            raise AuthenticationError(f"gh auth token returned an empty token for host {self.hostname}")
        return token

    async def _gh_auth_token(self) -> str:
        _LOG.debug("Resolving token via gh CLI for %s", self.hostname)
        try:
            process = await asyncio.create_subprocess_exec(
                "gh",
                "auth",
                "token",
                "--hostname",
                self.hostname,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise AuthenticationError(f"Failed to execute gh CLI: {exc}") from exc

        stdout, stderr = await process.communicate()
        if process.returncode == 0:
            return stdout.decode(errors="replace")

        details = stderr.decode(errors="replace").strip()
        suffix = f": {details}" if details else ""
        raise AuthenticationError(f"gh auth token failed for host {self.hostname}{suffix}")
