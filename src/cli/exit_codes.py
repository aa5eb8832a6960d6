"""Exit code taxonomy for the nrinstrumentation CLI."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Exit codes follow Unix conventions with domain-specific extensions:
    - 0: Success
    - 1-9: General errors (parse, validation, config)
    - 10-19: Pipeline stage errors
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    PARSE_ERROR = 2
    VALIDATION_ERROR = 3
    CONFIG_ERROR = 4

    # Pipeline stage errors (10-19)
    EXTRACTION_ERROR = 10
    WRITE_ERROR = 11

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExitCode:
        """Map an exception to an appropriate exit code.

        Parameters
        ----------
        exc
            Exception to classify.

        Returns
        -------
        ExitCode
            Exit code appropriate for the exception type.
        """
        cyclopts_code = _exit_code_for_cyclopts(exc)
        if cyclopts_code is not None:
            return cyclopts_code

        type_code = _exit_code_for_exception_type(exc)
        if type_code is not None:
            return type_code

        return cls.GENERAL_ERROR


def _exit_code_for_cyclopts(exc: BaseException) -> ExitCode | None:
    module = exc.__class__.__module__
    if not module.startswith("cyclopts"):
        return None
    if exc.__class__.__name__ == "ValidationError":
        return ExitCode.VALIDATION_ERROR
    return ExitCode.PARSE_ERROR


def _exit_code_for_exception_type(exc: BaseException) -> ExitCode | None:
    from classfile.errors import ClassFormatError
    from cli.config_loader import ConfigError
    from instrumentation.errors import DescriptorWriteError

    mappings: tuple[tuple[type[BaseException] | tuple[type[BaseException], ...], ExitCode], ...] = (
        (ConfigError, ExitCode.CONFIG_ERROR),
        (DescriptorWriteError, ExitCode.WRITE_ERROR),
        (ClassFormatError, ExitCode.EXTRACTION_ERROR),
        ((ValueError, TypeError), ExitCode.VALIDATION_ERROR),
        ((FileNotFoundError, FileExistsError, PermissionError), ExitCode.CONFIG_ERROR),
    )
    for exc_types, exit_code in mappings:
        if isinstance(exc, exc_types):
            return exit_code
    return None


__all__ = ["ExitCode"]
