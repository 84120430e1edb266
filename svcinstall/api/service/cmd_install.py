"""Service install command - provisions the account and installs the unit."""

import queue
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.service import ServiceInstallOutput
from ..config.ConfigError import ConfigError
from ..config.InstallConfig import InstallConfig
from ..StageResult import StageResult
from ._drain import _drain, _progress_messages
from .CommandRunner import CommandRunner
from .Manager import Manager
from .ServiceError import ServiceError


def cmd_install(config_path: Path | None = None, runner: CommandRunner | None = None) -> StageResult:
    """Install the service described by the config file.

    Args:
        config_path: Config file; defaults to $SVCINSTALL_CONFIG or ~/.svcinstall/config.json
        runner: Command runner (tests inject a recording fake)
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
            result_obj.output = ServiceInstallOutput(
                errors=e.errors,
                warnings=[],
                message=str(e),
                installed=False,
                service_name="",
                files=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.2, f"Installing {config.service_name}...")
        info: queue.Queue = queue.Queue()
        errors: queue.Queue = queue.Queue()
        manager = Manager(config, info_conduit=info, error_conduit=errors, runner=runner)
        files: list[str] = []
        failure: ServiceError | None = None
        try:
            files = manager.install()
        except ServiceError as e:
            failure = e

        yield from _progress_messages(info, 0.2, 0.9)
        yield (1.0, "Complete")

        error_list = [str(err) for err in _drain(errors)]
        if failure is None:
            result_obj.result = f"Service installed successfully ({config.service_name})"
        else:
            result_obj.result = f"Error installing service: {failure}"
        result_obj.output = ServiceInstallOutput(
            errors=error_list,
            warnings=[],
            message=result_obj.result,
            installed=failure is None,
            service_name=config.service_name,
            files=files,
        ).model_dump(mode="python")
        result_obj.success = failure is None

    return StageResult(
        announce="Installing service...",
        progress_callback=do_work,
    )
