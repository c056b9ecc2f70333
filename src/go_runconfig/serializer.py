"""XML rendering of run configuration descriptors."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from .descriptor import COMPONENT_NAME, RunConfigurationDescriptor
from .errors import SerializationError

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = "  "
REPLACEMENT_CHAR = "\ufffd"

# characters outside the XML 1.0 Char production, lone surrogates included
INVALID_XML_CHARS_RE = re.compile(r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _flag(value: bool) -> str:
    return "true" if value else "false"


def xml_safe(value: str) -> str:
    """Replace characters XML 1.0 cannot carry with U+FFFD."""
    return INVALID_XML_CHARS_RE.sub(REPLACEMENT_CHAR, value)


def _attrs(**values: str) -> dict:
    return {key: xml_safe(value) for key, value in values.items()}


def to_element(descriptor: RunConfigurationDescriptor) -> ET.Element:
    """Build the ``<component>`` tree; attribute order is insertion order."""
    root = ET.Element("component", _attrs(name=COMPONENT_NAME))
    cfg = ET.SubElement(
        root,
        "configuration",
        _attrs(
            default=_flag(descriptor.default),
            name=descriptor.name,
            type=descriptor.type,
            factoryName=descriptor.factory_name,
            folderName=descriptor.folder_name,
        ),
    )
    ET.SubElement(cfg, "module", _attrs(name=descriptor.module))
    ET.SubElement(cfg, "working_directory", _attrs(value=descriptor.working_directory))
    ET.SubElement(cfg, "kind", _attrs(value=descriptor.kind))
    ET.SubElement(cfg, "package", _attrs(value=descriptor.package))
    ET.SubElement(cfg, "filePath", _attrs(value=descriptor.file_path))
    ET.SubElement(cfg, "method", _attrs(v=descriptor.method))
    ET.SubElement(cfg, "directory", _attrs(value=descriptor.directory))
    return root


def serialize(descriptor: RunConfigurationDescriptor) -> bytes:
    """Render ``descriptor`` as an UTF-8 XML document with a declaration header."""
    try:
        root = to_element(descriptor)
        ET.indent(root, space=INDENT)
        body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
        return (XML_HEADER + body).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Error marshaling XML: {exc}") from exc
