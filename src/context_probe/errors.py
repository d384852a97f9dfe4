"""Error types for context-probe.

Every failure of an assistant invocation surfaces as an InvocationError so
the CLI can handle all of them at a single boundary.
"""

from dataclasses import dataclass

# Exit code reported when the executable could not be started at all,
# matching the shell's "command not found" status.
EXIT_CODE_NOT_FOUND = 127


@dataclass
class ContextProbeError(Exception):
    """Base error class for context-probe errors."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(init=False)
class InvocationError(ContextProbeError):
    """The assistant process exited with a non-zero status."""

    exit_code: int
    stderr: str
    executable: str

    def __init__(self, exit_code: int, stderr: str, executable: str = "claude"):
        self.exit_code = exit_code
        self.stderr = stderr
        self.executable = executable
        super().__init__(f"{executable} exited with code {exit_code}: {stderr}")


@dataclass(init=False)
class ExecutableNotFoundError(InvocationError):
    """The assistant executable could not be spawned."""

    def __init__(self, executable: str, reason: str):
        super().__init__(EXIT_CODE_NOT_FOUND, reason, executable)


@dataclass
class ConfigError(ContextProbeError):
    """The configuration file could not be used."""
