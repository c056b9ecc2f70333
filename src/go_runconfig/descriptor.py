"""Run configuration record mirroring the GoLand ``Go Application`` schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .naming import PROJECT_DIR_MACRO

COMPONENT_NAME = "ProjectRunConfigurationManager"
CONFIGURATION_TYPE = "GoApplicationRunConfiguration"
FACTORY_NAME = "Go Application"
KIND_PACKAGE = "PACKAGE"
METHOD_MARKER = "2"


class RunConfigurationDescriptor(BaseModel):
    """One ``<configuration>`` entry of a ``ProjectRunConfigurationManager`` file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default: bool = False
    name: str
    type: str = CONFIGURATION_TYPE
    factory_name: str = FACTORY_NAME
    folder_name: str
    module: str
    working_directory: str
    kind: str = KIND_PACKAGE
    package: str
    file_path: str
    method: str = METHOD_MARKER
    directory: str = PROJECT_DIR_MACRO


def build_descriptor(
    config_name: str,
    folder_name: str,
    module: str,
    full_dir_path: str,
    package_path: str,
    *,
    project_dir: str = PROJECT_DIR_MACRO,
) -> RunConfigurationDescriptor:
    return RunConfigurationDescriptor(
        name=config_name,
        folder_name=folder_name,
        module=module,
        working_directory=full_dir_path,
        package=package_path,
        file_path=full_dir_path,
        directory=project_dir,
    )
