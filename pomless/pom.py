"""
pomless.pom - Maven POM files

Two directions:

- PomReader reads the pom.xml of a plain Maven parent project, so that
  descriptor projects can inherit groupId and version from it.
- render_pom()/write_pom() turn a synthesized ProjectModel back into a
  POM document for tools that only understand Maven files.

Output structure of render_pom():
    <project xmlns="http://maven.apache.org/POM/4.0.0">
        <modelVersion>4.0.0</modelVersion>
        <parent>...</parent>
        <artifactId>...</artifactId>
        ...
        <build><plugins>...</plugins></build>
    </project>
"""

from pathlib import Path
from typing import Optional
from xml.etree import ElementTree

from pomless.errors import MissingRequiredField
from pomless.model import (
    MODEL_VERSION,
    ConfigNode,
    Organization,
    ParentReference,
    ProjectModel,
)
from pomless.xmldesc import local_name, read_root_element

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
POM_SCHEMA_LOCATION = "http://maven.apache.org/xsd/maven-4.0.0.xsd"
DEFAULT_PACKAGING = "jar"


def _child(element: ElementTree.Element, name: str) -> Optional[ElementTree.Element]:
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ElementTree.Element, name: str) -> Optional[str]:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    text = child.text.strip()
    return text or None


def _read_parent(project: ElementTree.Element) -> Optional[ParentReference]:
    parent = _child(project, "parent")
    if parent is None:
        return None
    group_id = _child_text(parent, "groupId")
    artifact_id = _child_text(parent, "artifactId")
    version = _child_text(parent, "version")
    if group_id is None or artifact_id is None or version is None:
        return None
    return ParentReference(group_id=group_id, artifact_id=artifact_id, version=version)


class PomReader:
    """Reads a pom.xml as written. Inheritance is left to the caller."""

    def read(self, path: Path, depth: int = 0) -> ProjectModel:
        path = Path(path)
        project = read_root_element(path)

        artifact_id = _child_text(project, "artifactId")
        if artifact_id is None:
            raise MissingRequiredField(
                "artifactId", path, f"missing or empty artifactId element in {path}"
            )

        organization = None
        org_element = _child(project, "organization")
        if org_element is not None:
            org_name = _child_text(org_element, "name")
            if org_name is not None:
                organization = Organization(org_name)

        return ProjectModel(
            group_id=_child_text(project, "groupId"),
            artifact_id=artifact_id,
            version=_child_text(project, "version"),
            packaging=_child_text(project, "packaging") or DEFAULT_PACKAGING,
            name=_child_text(project, "name") or artifact_id,
            organization=organization,
            parent=_read_parent(project),
            source_location=path,
            model_version=_child_text(project, "modelVersion") or MODEL_VERSION,
        )


def _text_element(parent: ElementTree.Element, tag: str, text: Optional[str]) -> None:
    if text is not None:
        ElementTree.SubElement(parent, tag).text = text


def _config_element(parent: ElementTree.Element, node: ConfigNode) -> None:
    element = ElementTree.SubElement(parent, node.name)
    if node.value is not None:
        element.text = node.value
    for child in node.children:
        _config_element(element, child)


def render_pom(model: ProjectModel) -> str:
    """Render a model as POM XML text."""
    project = ElementTree.Element(
        "project",
        {
            "xmlns": POM_NAMESPACE,
            "xmlns:xsi": "http://www.w3.org/2001/XMLSchema-instance",
            "xsi:schemaLocation": f"{POM_NAMESPACE} {POM_SCHEMA_LOCATION}",
        },
    )
    _text_element(project, "modelVersion", model.model_version)

    if model.parent is not None:
        parent = ElementTree.SubElement(project, "parent")
        _text_element(parent, "groupId", model.parent.group_id)
        _text_element(parent, "artifactId", model.parent.artifact_id)
        _text_element(parent, "version", model.parent.version)

    _text_element(project, "groupId", model.group_id)
    _text_element(project, "artifactId", model.artifact_id)
    _text_element(project, "version", model.version)
    _text_element(project, "packaging", model.packaging)
    _text_element(project, "name", model.name)

    if model.organization is not None:
        organization = ElementTree.SubElement(project, "organization")
        _text_element(organization, "name", model.organization.name)

    if model.build is not None and model.build.plugins:
        plugins = ElementTree.SubElement(ElementTree.SubElement(project, "build"), "plugins")
        for plugin in model.build.plugins:
            plugin_element = ElementTree.SubElement(plugins, "plugin")
            _text_element(plugin_element, "groupId", plugin.group_id)
            _text_element(plugin_element, "artifactId", plugin.artifact_id)
            if not plugin.executions:
                continue
            executions = ElementTree.SubElement(plugin_element, "executions")
            for execution in plugin.executions:
                execution_element = ElementTree.SubElement(executions, "execution")
                _text_element(execution_element, "id", execution.id)
                if execution.goals:
                    goals = ElementTree.SubElement(execution_element, "goals")
                    for goal in execution.goals:
                        _text_element(goals, "goal", goal)
                if execution.configuration is not None:
                    _config_element(execution_element, execution.configuration)

    ElementTree.indent(project, space="  ")
    body = ElementTree.tostring(project, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"


def write_pom(model: ProjectModel, path: Path) -> Path:
    """Write render_pom(model) to path and return the path."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_pom(model))
    return path
