"""Errors raised while installing or uninstalling a service."""


class ServiceError(Exception):
    """Base class for install/uninstall failures."""


class CommandError(ServiceError):
    """An external command exited non-zero or could not be started.

    Carries everything needed to diagnose the failure without re-running it.
    `returncode` is None when the executable could not be launched at all.
    """

    def __init__(self, command: str, args: list[str], returncode: int | None, output: str):
        self.command = command
        self.args_list = list(args)
        self.returncode = returncode
        self.output = output
        status = f"exit status {returncode}" if returncode is not None else "could not start"
        super().__init__(f"{command} failed: {status}\noutput: {output}")

    @property
    def cmdline(self) -> list[str]:
        return [self.command, *self.args_list]


class ProvisionError(CommandError):
    """useradd/groupadd failed while ensuring the service account exists."""

    @classmethod
    def from_command_error(cls, err: CommandError) -> "ProvisionError":
        return cls(err.command, err.args_list, err.returncode, err.output)


class WriteError(ServiceError):
    """A generated file could not be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"failed to write {path}: {reason}")


class RemovalError(ServiceError):
    """A generated file could not be removed (other than because it was missing)."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"failed to remove {path}: {reason}")
