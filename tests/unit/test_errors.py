"""Unit tests for context-probe error types."""

from context_probe.errors import (
    EXIT_CODE_NOT_FOUND,
    ConfigError,
    ContextProbeError,
    ExecutableNotFoundError,
    InvocationError,
)


class TestInvocationError:
    def test_message_carries_code_and_stderr(self):
        error = InvocationError(2, "rate limited\n")

        assert error.message == "claude exited with code 2: rate limited\n"
        assert str(error) == error.message

    def test_executable_in_message(self):
        error = InvocationError(1, "nope", executable="my-assistant")

        assert error.message.startswith("my-assistant exited with code 1")
        assert error.executable == "my-assistant"

    def test_is_context_probe_error(self):
        assert isinstance(InvocationError(1, ""), ContextProbeError)


class TestExecutableNotFoundError:
    def test_is_invocation_error(self):
        error = ExecutableNotFoundError("claude", "No such file or directory")

        assert isinstance(error, InvocationError)
        assert error.exit_code == EXIT_CODE_NOT_FOUND
        assert error.stderr == "No such file or directory"
        assert "127" in str(error)


def test_config_error_message():
    assert str(ConfigError("bad file")) == "bad file"
