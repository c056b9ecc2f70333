"""End-to-end generation of one run configuration file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .descriptor import RunConfigurationDescriptor, build_descriptor
from .errors import MissingRequiredInputError
from .naming import (
    compose_package_path,
    derive_config_name,
    derive_file_name,
    derive_folder_name,
    prefix_project_root,
)
from .serializer import serialize
from .settings import Settings
from .writer import (
    CleanupReport,
    absolute_or_relative,
    ensure_output_dir,
    remove_current_configurations,
    write_configuration,
)

logger = logging.getLogger(__name__)

REQUIRED_FLAGS = {
    "working_dir": "-workingDir",
    "module_name": "-moduleName",
    "package": "-package",
}


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    working_dir: str = ""
    module_name: str = ""
    package: str = ""
    current: bool = False

    @field_validator("working_dir", "module_name", "package", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    def check_required(self) -> "GenerationRequest":
        missing = [flag for attr, flag in REQUIRED_FLAGS.items() if not getattr(self, attr)]
        if missing:
            raise MissingRequiredInputError(missing)
        return self


@dataclass
class GenerationPlan:
    """Everything derived from a request, before any file is touched."""

    descriptor: RunConfigurationDescriptor
    file_stem: str
    payload: bytes


@dataclass
class GenerationResult:
    path: Path
    absolute_path: Path
    descriptor: RunConfigurationDescriptor
    cleanup: Optional[CleanupReport] = None


def plan(request: GenerationRequest, settings: Settings) -> GenerationPlan:
    request.check_required()
    sep = settings.separator

    config_name = derive_config_name(request.working_dir, settings.name_depth, sep)
    file_stem = derive_file_name(config_name, sep)
    if request.current:
        file_stem = settings.current_prefix + file_stem
        folder_name = settings.current_folder
    else:
        folder_name = derive_folder_name(request.working_dir, sep)

    full_dir_path = prefix_project_root(request.working_dir, sep, settings.project_dir)
    package_path = compose_package_path(request.package, request.module_name, request.working_dir, sep)

    descriptor = build_descriptor(
        config_name,
        folder_name,
        request.module_name,
        full_dir_path,
        package_path,
        project_dir=settings.project_dir,
    )
    logger.debug("Descriptor for %s: %s", config_name, descriptor)
    return GenerationPlan(descriptor=descriptor, file_stem=file_stem, payload=serialize(descriptor))


def generate(request: GenerationRequest, settings: Optional[Settings] = None) -> GenerationResult:
    """Derive, render and write the run configuration for ``request``."""
    settings = settings or Settings()
    prepared = plan(request, settings)

    output_dir = ensure_output_dir(settings.output_dir)
    cleanup = None
    if request.current:
        cleanup = remove_current_configurations(output_dir, settings.current_prefix)

    path = write_configuration(output_dir, prepared.file_stem, prepared.payload)
    absolute_path = absolute_or_relative(path)
    logger.info("Run configuration generated successfully at %s", absolute_path)
    return GenerationResult(
        path=path,
        absolute_path=absolute_path,
        descriptor=prepared.descriptor,
        cleanup=cleanup,
    )
