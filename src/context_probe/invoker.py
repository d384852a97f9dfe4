"""ProcessInvoker - Sends one prompt to the assistant CLI per process.

Each call spawns the executable, writes the prompt to its stdin, closes
stdin, and drains stdout and stderr until the process exits. There is no
timeout and no cancellation: the call waits for as long as the child runs.
"""

import asyncio
from dataclasses import dataclass
from typing import Protocol

from .config import DEFAULT_CONTINUE_FLAG, DEFAULT_EXECUTABLE
from .errors import ExecutableNotFoundError, InvocationError
from .shared.logging import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"


@dataclass(frozen=True)
class InvocationRequest:
    """A single prompt and whether to continue the previous session."""

    prompt: str
    use_continue: bool = False


class Invoker(Protocol):
    """Anything the scenario runner can send prompts to."""

    async def invoke(self, prompt: str, use_continue: bool = False) -> str: ...


class ProcessInvoker:
    """Runs the assistant executable once per prompt."""

    def __init__(
        self,
        executable: str = DEFAULT_EXECUTABLE,
        continue_flag: str = DEFAULT_CONTINUE_FLAG,
    ):
        """Initialize ProcessInvoker.

        Args:
            executable: Command name or path, resolved through PATH
            continue_flag: Argument that asks the executable to continue
                the most recent session
        """
        self.executable = executable
        self.continue_flag = continue_flag

    def build_args(self, use_continue: bool) -> list[str]:
        """Arguments passed to the executable for one invocation."""
        return [self.continue_flag] if use_continue else []

    async def invoke(self, prompt: str, use_continue: bool = False) -> str:
        """Send a prompt and return everything the executable wrote to stdout.

        Args:
            prompt: Text written to the executable's stdin
            use_continue: Pass the continuation flag

        Returns:
            Decoded stdout, unmodified

        Raises:
            InvocationError: If the process exits with a non-zero code
            ExecutableNotFoundError: If the executable cannot be started
        """
        return await self.run(InvocationRequest(prompt=prompt, use_continue=use_continue))

    async def run(self, request: InvocationRequest) -> str:
        """Execute one invocation request."""
        args = self.build_args(request.use_continue)
        log = logger.bind(executable=self.executable, args=args)
        log.debug("spawning_process", prompt_chars=len(request.prompt))

        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            log.info("spawn_failed", error=str(e))
            raise ExecutableNotFoundError(self.executable, str(e)) from e

        _, stdout, stderr = await asyncio.gather(
            self._write_prompt(process, request.prompt),
            self._drain(process.stdout),
            self._drain(process.stderr),
        )
        exit_code = await process.wait()

        output = stdout.decode(ENCODING, errors="replace")
        error = stderr.decode(ENCODING, errors="replace")
        log.info("process_exited", exit_code=exit_code, stdout_bytes=len(stdout))

        if exit_code != 0:
            log.info("invocation_failed", exit_code=exit_code, stderr=error)
            raise InvocationError(exit_code, error, self.executable)
        return output

    async def _write_prompt(self, process: asyncio.subprocess.Process, prompt: str) -> None:
        stdin = process.stdin
        try:
            stdin.write(prompt.encode(ENCODING))
            await stdin.drain()
        except (BrokenPipeError, ConnectionResetError):
            # Child exited without reading its input; the exit code decides.
            logger.debug("stdin_closed_early", executable=self.executable)
        finally:
            stdin.close()

    async def _drain(self, stream: asyncio.StreamReader) -> bytes:
        chunks = []
        while chunk := await stream.read(65536):
            chunks.append(chunk)
        return b"".join(chunks)
