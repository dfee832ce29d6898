"""
pomless.xmldesc - XML descriptor access

feature.xml, *.product, category.xml and .project files are small XML
documents whose interesting data lives on the root element. This module
parses them with xml.etree.ElementTree and turns parser failures into
MalformedDescriptor errors.
"""

import errno
from pathlib import Path
from typing import Optional
from xml.etree import ElementTree

from pomless.config import PROJECT_FILENAME
from pomless.errors import MalformedDescriptor, MissingRequiredField


def local_name(tag: str) -> str:
    """Strip an ElementTree namespace prefix: '{ns}artifactId' -> 'artifactId'."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def read_root_element(path: Path) -> ElementTree.Element:
    """
    Parse an XML file and return its root element.

    Raises:
        MalformedDescriptor: If the file is not well-formed XML.
        OSError: If the file cannot be read.
    """
    with open(path, "rb") as f:
        try:
            tree = ElementTree.parse(f)
        except ElementTree.ParseError as e:
            line, column = getattr(e, "position", (None, None))
            raise MalformedDescriptor(str(e), path, line=line, column=column) from e
    return tree.getroot()


def get_attribute(element: ElementTree.Element, name: str) -> Optional[str]:
    """Attribute value, with a missing or empty attribute both reported as None."""
    value = element.get(name)
    if value:
        return value
    return None


def require_attribute(element: ElementTree.Element, name: str, path: Path) -> str:
    value = get_attribute(element, name)
    if value is None:
        raise MissingRequiredField(
            name,
            path,
            f"missing or empty {name} attribute in root element ({path.resolve()})",
        )
    return value


def read_project_name(project_root: Path) -> str:
    """
    Read the <name> element of the Eclipse .project file in project_root.

    Raises:
        FileNotFoundError: If there is no .project file.
        MissingRequiredField: If the file has no non-empty <name> element.
    """
    project_file = project_root / PROJECT_FILENAME
    if not project_file.is_file():
        raise FileNotFoundError(
            errno.ENOENT,
            f"No {PROJECT_FILENAME} file could be found in project directory: {project_root}",
            str(project_file),
        )

    root = read_root_element(project_file)
    for element in root.iter():
        if local_name(element.tag) == "name":
            name = (element.text or "").strip()
            if name:
                return name
            break

    raise MissingRequiredField(
        "name", project_file, f"No name element found in {PROJECT_FILENAME} file {project_file}"
    )
