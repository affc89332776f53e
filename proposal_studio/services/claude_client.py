"""Claude Code CLI client used as the generation transport.

Wraps the Claude CLI (`claude -p`) and exposes a single async call:
- complete(): system instruction + request text in, raw response text out

Runtime requirements:
- the `claude` CLI must be on PATH
- the blocking CLI call runs in a ThreadPoolExecutor

There is no retry here. A failed generation is reported once and the
caller decides whether to resubmit.
"""

import asyncio
import logging
import os
import subprocess
import sys
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Optional

from proposal_studio.config import get_settings
from proposal_studio.exceptions import ClaudeClientError

logger = logging.getLogger(__name__)

# Where npm / Homebrew put the `claude` binary when PATH does not include it
_WINDOWS_CLI_DIRS = ("~\\AppData\\Roaming\\npm",)
_POSIX_CLI_DIRS = ("~/.npm-global/bin", "/usr/local/bin", "/opt/homebrew/bin")


class ClaudeClient:
    """
    Claude Code CLI wrapper.

    Attributes:
        model: Model name passed to the CLI
        timeout_seconds: Subprocess timeout (transport-level)
        _executor: ThreadPoolExecutor running the CLI
    """

    def __init__(self, model: Optional[str] = None, timeout_seconds: Optional[int] = None):
        settings = get_settings()
        self.model = model or settings.claude_model
        self.timeout_seconds = timeout_seconds or settings.claude_timeout_seconds

        # min 2, max 8 workers, CPU count by default
        cpu_count = os.cpu_count() or 4
        max_workers = min(8, max(2, cpu_count))
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

        logger.info(f"[ClaudeClient] CLI mode ready (model={self.model}, workers={max_workers})")

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Send a completion request to Claude via CLI.

        Args:
            system_prompt: Fixed system instruction
            user_prompt: Hydrated request text

        Returns:
            Claude's raw response text

        Raises:
            ClaudeClientError: CLI missing, non-zero exit or timeout
        """
        full_prompt = f"""{system_prompt}

---

{user_prompt}"""

        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(self._executor, self._run_claude_sync, full_prompt)
        except ClaudeClientError:
            raise
        except (OSError, subprocess.SubprocessError) as e:
            logger.error(f"[CLI] {type(e).__name__}: {e}")
            raise ClaudeClientError("Claude CLI call failed", details={"error": str(e)}) from e

    def _get_env(self) -> dict:
        """Subprocess environment with the usual npm / Homebrew bin dirs ahead of PATH."""
        env = os.environ.copy()
        cli_dirs = _WINDOWS_CLI_DIRS if sys.platform == "win32" else _POSIX_CLI_DIRS
        search_path = [os.path.expanduser(d) for d in cli_dirs]
        env["PATH"] = os.pathsep.join([*search_path, env.get("PATH", "")])
        return env

    def _run_claude_sync(self, prompt: str) -> str:
        """Run Claude CLI synchronously."""
        logger.info(f"[CLI] prompt length: {len(prompt)} chars")
        start_time = datetime.now()

        use_shell = sys.platform == "win32"
        result = subprocess.run(
            ["claude", "-p", prompt, "--model", self.model, "--output-format", "text"],
            capture_output=True,
            text=True,
            timeout=self.timeout_seconds,
            env=self._get_env(),
            shell=use_shell,
            encoding="utf-8",
        )

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[CLI] done: {elapsed:.1f}s, returncode={result.returncode}")

        if result.returncode != 0:
            error_msg = result.stderr or "Unknown error"
            logger.error(f"[CLI] error: {error_msg}")
            raise ClaudeClientError("Claude CLI returned an error", details={"stderr": error_msg})

        logger.info(f"[CLI] response length: {len(result.stdout)} chars")
        return result.stdout.strip()

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)
