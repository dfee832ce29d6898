"""
pomless.model - Normalized project model

The reader turns every descriptor format into a ProjectModel. Models are
frozen once built. The one deliberately mutable piece is ConfigNode: the
product build shares a single configuration node between two executions,
so a change made through one execution shows up in the other.
"""

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

MODEL_VERSION = "4.0.0"


class ProjectDescriptorKind(enum.Enum):
    """Native descriptor formats, in the order they are probed."""

    MODULE = "module"
    FEATURE = "feature"
    PRODUCT = "product"
    CATEGORY = "category"


@dataclass(frozen=True)
class Descriptor:
    """A descriptor file found in a project directory."""

    kind: ProjectDescriptorKind
    path: Path

    @property
    def project_root(self) -> Path:
        # META-INF/MANIFEST.MF sits two levels below the project root
        if self.kind is ProjectDescriptorKind.MODULE:
            return self.path.parent.parent
        return self.path.parent


@dataclass(frozen=True)
class Organization:
    name: str


@dataclass(frozen=True)
class ParentReference:
    """Coordinates of the ancestor project a model inherits from."""

    group_id: str
    artifact_id: str
    version: str

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


class ConfigNode:
    """
    A named node of plugin configuration, with an optional text value and
    ordered children.

    Nodes are mutable and compared by identity.
    """

    def __init__(self, name: str, value: Optional[str] = None):
        self.name = name
        self.value = value
        self.children: list["ConfigNode"] = []

    def add_child(self, child: "ConfigNode") -> "ConfigNode":
        self.children.append(child)
        return child

    def child(self, name: str) -> Optional["ConfigNode"]:
        """Return the first child called name, or None."""
        for node in self.children:
            if node.name == name:
                return node
        return None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.value is not None:
            result["value"] = self.value
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        return result

    def __repr__(self) -> str:
        return f"ConfigNode({self.name!r}, value={self.value!r}, children={len(self.children)})"


@dataclass
class PluginExecution:
    id: str
    goals: list[str] = field(default_factory=list)
    configuration: Optional[ConfigNode] = None


@dataclass
class Plugin:
    group_id: str
    artifact_id: str
    executions: list[PluginExecution] = field(default_factory=list)

    def add_execution(self, execution: PluginExecution) -> PluginExecution:
        self.executions.append(execution)
        return execution


@dataclass
class Build:
    plugins: list[Plugin] = field(default_factory=list)

    def add_plugin(self, plugin: Plugin) -> Plugin:
        self.plugins.append(plugin)
        return plugin

    def execution(self, execution_id: str) -> Optional[PluginExecution]:
        """Find an execution by id across all plugins."""
        for plugin in self.plugins:
            for execution in plugin.executions:
                if execution.id == execution_id:
                    return execution
        return None


@dataclass(frozen=True)
class ProjectModel:
    """
    A build project synthesized from a native descriptor.

    Required fields:
        artifact_id: Bundle symbolic name, feature id, product uid or project name
        version: Normalized version ("1.0.0.qualifier" becomes "1.0.0-SNAPSHOT")
        packaging: eclipse-plugin, eclipse-test-plugin, eclipse-feature,
                   eclipse-repository (or a POM's own packaging)
        name: Display name, defaults to artifact_id

    Optional fields:
        group_id: Only POM files set it; descriptor models inherit it
        organization: Vendor or provider name
        parent: Coordinates of the ancestor project
        build: Build plugins, only for product descriptors
        source_location: The file the model was read from
    """

    artifact_id: str
    version: Optional[str]
    packaging: str
    name: str
    group_id: Optional[str] = None
    organization: Optional[Organization] = None
    parent: Optional[ParentReference] = None
    build: Optional[Build] = None
    source_location: Optional[Path] = None
    model_version: str = MODEL_VERSION

    @property
    def effective_group_id(self) -> Optional[str]:
        """The model's own group id, or the one inherited from its parent."""
        if self.group_id is not None:
            return self.group_id
        if self.parent is not None:
            return self.parent.group_id
        return None

    @property
    def effective_version(self) -> Optional[str]:
        if self.version is not None:
            return self.version
        if self.parent is not None:
            return self.parent.version
        return None

    @property
    def model_id(self) -> str:
        return f"{self.effective_group_id}:{self.artifact_id}:{self.effective_version}"

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of the model, suitable for json.dumps."""
        result: dict[str, Any] = {
            "modelVersion": self.model_version,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
            "packaging": self.packaging,
            "name": self.name,
        }
        if self.organization is not None:
            result["organization"] = self.organization.name
        if self.parent is not None:
            result["parent"] = {
                "groupId": self.parent.group_id,
                "artifactId": self.parent.artifact_id,
                "version": self.parent.version,
            }
        if self.build is not None:
            result["build"] = {
                "plugins": [
                    {
                        "groupId": plugin.group_id,
                        "artifactId": plugin.artifact_id,
                        "executions": [
                            {
                                "id": execution.id,
                                "goals": list(execution.goals),
                                "configuration": (
                                    execution.configuration.to_dict()
                                    if execution.configuration is not None
                                    else None
                                ),
                            }
                            for execution in plugin.executions
                        ],
                    }
                    for plugin in self.build.plugins
                ]
            }
        if self.source_location is not None:
            result["sourceLocation"] = str(self.source_location)
        return result
