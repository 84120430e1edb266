"""Service render command - shows the files install would write."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.service import ServiceRenderOutput
from ..config.ConfigError import ConfigError
from ..config.InstallConfig import InstallConfig
from ..StageResult import StageResult
from .Manager import Manager


def cmd_render(config_path: Path | None = None) -> StageResult:
    """Render unit, rsyslog and logrotate files without touching the system."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = InstallConfig.load(config_path).to_service_config()
        except ConfigError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = ServiceRenderOutput(
                errors=e.errors,
                warnings=[],
                message=str(e),
                service_name="",
                files={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Rendering files...")
        files = {rendered.path: rendered.content for rendered in Manager(config).render()}

        yield (1.0, "Complete")
        result_obj.result = f"Rendered {len(files)} file(s) for {config.service_name}"
        result_obj.output = ServiceRenderOutput(
            errors=[],
            warnings=[],
            message=result_obj.result,
            service_name=config.service_name,
            files=files,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Rendering service files...",
        progress_callback=do_work,
    )
