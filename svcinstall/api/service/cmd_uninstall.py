"""Service uninstall command - stops the service and removes generated files."""

import queue
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.service import ServiceUninstallOutput
from ..config.ConfigError import ConfigError
from ..config.InstallConfig import InstallConfig
from ..StageResult import StageResult
from ._drain import _drain, _progress_messages
from .CommandRunner import CommandRunner
from .Manager import Manager
from .ServiceError import ServiceError


def cmd_uninstall(config_path: Path | None = None, runner: CommandRunner | None = None) -> StageResult:
    """Uninstall the service described by the config file.

    File removal problems are reported as warnings; only a failed
    daemon-reload makes the command fail.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            config = InstallConfig.load(config_path).to_service_config()
        except ConfigError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = ServiceUninstallOutput(
                errors=e.errors,
                warnings=[],
                message=str(e),
                uninstalled=False,
                service_name="",
                files=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.2, f"Uninstalling {config.service_name}...")
        info: queue.Queue = queue.Queue()
        errors: queue.Queue = queue.Queue()
        manager = Manager(config, info_conduit=info, error_conduit=errors, runner=runner)
        failure: ServiceError | None = None
        try:
            manager.uninstall()
        except ServiceError as e:
            failure = e

        yield from _progress_messages(info, 0.2, 0.9)
        yield (1.0, "Complete")

        reported = [str(err) for err in _drain(errors)]
        if failure is None:
            result_obj.result = f"Service uninstalled successfully ({config.service_name})"
            error_list, warnings = [], reported
        else:
            result_obj.result = f"Error uninstalling service: {failure}"
            error_list, warnings = [str(failure)], [msg for msg in reported if msg != str(failure)]
        result_obj.output = ServiceUninstallOutput(
            errors=error_list,
            warnings=warnings,
            message=result_obj.result,
            uninstalled=failure is None,
            service_name=config.service_name,
            files=[config.systemd_file, config.rsyslog_path(), *config.logrotate_paths()],
        ).model_dump(mode="python")
        result_obj.success = failure is None

    return StageResult(
        announce="Uninstalling service...",
        progress_callback=do_work,
    )
