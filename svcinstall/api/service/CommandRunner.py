"""Run external OS commands with combined output capture."""

import logging
import subprocess

from .ServiceError import CommandError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Execute OS-level commands (useradd, systemctl, ...).

    Inject a different implementation into Manager to record calls instead of
    touching the host.
    """

    def run(self, command: str, *args: str) -> str:
        """Run a command whose failure matters.

        Returns:
            Combined stdout/stderr text

        Raises:
            CommandError: On non-zero exit or if the executable cannot be started
        """
        logger.debug("running %s %s", command, " ".join(args))
        try:
            proc = subprocess.run(
                [command, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as e:
            raise CommandError(command, list(args), None, str(e)) from e

        if proc.returncode != 0:
            raise CommandError(command, list(args), proc.returncode, proc.stdout)
        return proc.stdout

    def probe(self, command: str, *args: str) -> bool:
        """Run a command only to test existence/state.

        Any failure, including a missing executable, means "does not exist".
        """
        try:
            self.run(command, *args)
        except CommandError as e:
            logger.debug("probe %s %s negative: %s", command, " ".join(args), e)
            return False
        return True
