from __future__ import annotations

import os
import xml.etree.ElementTree as ET

import pytest

from go_runconfig.errors import MissingRequiredInputError, PathDerivationOutOfBoundsError
from go_runconfig.generator import GenerationRequest, generate, plan
from go_runconfig.serializer import REPLACEMENT_CHAR
from go_runconfig.settings import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(separator="/", output_dir=tmp_path / ".idea" / "runConfigurations")


def _config(path):
    return ET.parse(path).getroot().find("configuration")


def test_generate_absolute_working_dir(settings):
    request = GenerationRequest(
        working_dir="/home/user/proj/cmd/server",
        module_name="myapp",
        package="/home/user/proj",
    )
    result = generate(request, settings)

    assert result.path == settings.output_dir / "cmd_server.xml"
    assert result.absolute_path.is_absolute()
    assert result.cleanup is None

    cfg = _config(result.path)
    assert cfg.get("name") == "cmd/server"
    assert cfg.get("folderName") == "proj"
    assert cfg.find("package").get("value") == "/home/user/proj/myapp//home/user/proj/cmd/server"
    assert cfg.find("working_directory").get("value") == "$PROJECT_DIR$//home/user/proj/cmd/server"
    assert cfg.find("filePath").get("value") == cfg.find("working_directory").get("value")
    assert cfg.find("module").get("name") == "myapp"


def test_generate_relative_working_dir(settings):
    request = GenerationRequest(working_dir="services/cmd/api", module_name="myapp", package="github.com/acme/")
    result = generate(request, settings)
    cfg = _config(result.path)
    assert result.path.name == "cmd_api.xml"
    assert cfg.get("folderName") == "services"
    assert cfg.find("working_directory").get("value") == "$PROJECT_DIR$/services/cmd/api"
    assert cfg.find("package").get("value") == "github.com/acme/myapp/services/cmd/api"


def test_generate_current_mode_replaces_previous(settings):
    settings.output_dir.mkdir(parents=True)
    old = settings.output_dir / "current_old.xml"
    old.write_text('<component name="ProjectRunConfigurationManager"/>')
    unrelated = settings.output_dir / "cmd_other.xml"
    unrelated.write_text('<component name="ProjectRunConfigurationManager"/>')

    request = GenerationRequest(
        working_dir="/home/user/proj/cmd/server",
        module_name="myapp",
        package="/home/user/proj",
        current=True,
    )
    result = generate(request, settings)

    assert not old.exists()
    assert unrelated.exists()
    assert result.path.name == "current_cmd_server.xml"
    assert [p.name for p in result.cleanup.removed] == ["current_old.xml"]
    assert _config(result.path).get("folderName") == "current"


def test_current_mode_accepts_two_segment_path(settings):
    request = GenerationRequest(working_dir="cmd/server", module_name="m", package="p", current=True)
    result = generate(request, settings)
    assert result.path.name == "current_cmd_server.xml"


def test_current_mode_rerun_keeps_only_new_file(settings):
    first = GenerationRequest(working_dir="a/cmd/one", module_name="m", package="p", current=True)
    second = GenerationRequest(working_dir="a/cmd/two", module_name="m", package="p", current=True)
    generate(first, settings)
    generate(second, settings)
    assert sorted(p.name for p in settings.output_dir.iterdir()) == ["current_cmd_two.xml"]


def test_single_segment_path_fails_before_touching_disk(settings):
    request = GenerationRequest(working_dir="server", module_name="m", package="p")
    with pytest.raises(PathDerivationOutOfBoundsError):
        generate(request, settings)
    assert not settings.output_dir.exists()


def test_missing_inputs_are_reported():
    with pytest.raises(MissingRequiredInputError) as excinfo:
        plan(GenerationRequest(working_dir="a/b/c"), Settings(separator="/"))
    assert excinfo.value.missing == ("-moduleName", "-package")


def test_settings_drive_naming(tmp_path):
    settings = Settings(
        separator="\\",
        name_depth=3,
        project_dir="$MODULE_DIR$",
        current_prefix="tmp_",
        current_folder="scratch",
        output_dir=tmp_path,
    )
    request = GenerationRequest(working_dir=r"repo\cmd\api\server", module_name="m", package="root\\", current=True)
    prepared = plan(request, settings)
    assert prepared.file_stem == "tmp_cmd_api_server"
    assert prepared.descriptor.name == r"cmd\api\server"
    assert prepared.descriptor.folder_name == "scratch"
    assert prepared.descriptor.directory == "$MODULE_DIR$"
    assert prepared.descriptor.working_directory == r"$MODULE_DIR$\repo\cmd\api\server"
    assert prepared.descriptor.package == r"root\m\repo\cmd\api\server"


def test_generation_is_byte_stable(settings):
    request = GenerationRequest(working_dir="a/cmd/server", module_name="m", package="p")
    first = generate(request, settings).path.read_bytes()
    second = generate(request, settings).path.read_bytes()
    assert first == second


def test_undecodable_working_dir_still_writes_parsable_file(settings):
    working_dir = os.fsdecode(b"a/cmd/serv\xff")
    request = GenerationRequest(working_dir=working_dir, module_name="m", package="p")
    result = generate(request, settings)

    cfg = _config(result.path)
    assert cfg.get("name") == "cmd/serv" + REPLACEMENT_CHAR
    assert cfg.find("working_directory").get("value") == "$PROJECT_DIR$/a/cmd/serv" + REPLACEMENT_CHAR
