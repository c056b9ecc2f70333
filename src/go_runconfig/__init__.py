"""Generate GoLand run configurations for Go executables."""

from .descriptor import RunConfigurationDescriptor, build_descriptor
from .errors import (
    InvalidInputError,
    MissingRequiredInputError,
    PathDerivationOutOfBoundsError,
    RunConfigError,
    SerializationError,
)
from .generator import GenerationRequest, GenerationResult, generate
from .naming import (
    compose_package_path,
    derive_config_name,
    derive_file_name,
    derive_folder_name,
    prefix_project_root,
)
from .serializer import serialize
from .settings import Settings, load_settings

__version__ = "0.1.0"
