"""
pomless.reader - Synthesize project models from native descriptors

ModelReader deduces a Maven-style model from an OSGi manifest
(Bundle-SymbolicName, Bundle-Version), a feature.xml (id, version), a
product file (uid, version) or a category.xml plus Eclipse .project file.

groupId is never declared by these formats. It is inherited from the
project found in the parent directory, which is read recursively by
whichever reader the ReaderRegistry assigns to it: another descriptor
project or a plain pom.xml.

Usage:
    from pomless import read_model

    model = read_model("bundles/org.example.core")
    print(model.model_id)   # org.example:org.example.core:1.0.0-SNAPSHOT
"""

import dataclasses
import logging
import os
from pathlib import Path
from typing import Any, Callable, Optional, Union

from pomless import manifest
from pomless.config import POM_FILENAME, ReaderSettings
from pomless.errors import (
    MissingRequiredField,
    NoDescriptorFound,
    ParentChainTooDeep,
    ParentNotFound,
)
from pomless.l10n import resolve_localized
from pomless.locator import DescriptorLocator, descriptor_for_path
from pomless.model import (
    Build,
    ConfigNode,
    Descriptor,
    Organization,
    ParentReference,
    Plugin,
    PluginExecution,
    ProjectDescriptorKind,
    ProjectModel,
)
from pomless.pom import PomReader
from pomless.version import (
    PACKAGING_FEATURE,
    PACKAGING_REPOSITORY,
    normalize_version,
    packaging_for,
)
from pomless.xmldesc import (
    get_attribute,
    read_project_name,
    read_root_element,
    require_attribute,
)

logger = logging.getLogger(__name__)

DIRECTOR_PLUGIN_GROUP_ID = "org.eclipse.tycho"
DIRECTOR_PLUGIN_ARTIFACT_ID = "tycho-p2-director-plugin"
MATERIALIZE_GOAL = "materialize-products"
ARCHIVE_GOAL = "archive-products"


class ReaderRegistry:
    """
    Picks the reader for a descriptor file.

    Readers are looked up by file name; anything unregistered goes to the
    default reader. Every reader provides read(path, depth=0).
    """

    def __init__(self, default_reader: Any):
        self.default_reader = default_reader
        self._readers: dict[str, Any] = {}

    def register(self, filename: str, reader: Any) -> None:
        self._readers[filename] = reader

    def reader_for(self, path: Path) -> Any:
        return self._readers.get(Path(path).name, self.default_reader)


def product_build(product_id: str) -> Build:
    """
    Build section materializing and archiving one product.

    Both executions share a single configuration node; changing it through
    either execution changes it for both.
    """
    config = ConfigNode("configuration")
    products = config.add_child(ConfigNode("products"))
    product = products.add_child(ConfigNode("product"))
    product.add_child(ConfigNode("id", product_id))

    build = Build()
    plugin = build.add_plugin(
        Plugin(group_id=DIRECTOR_PLUGIN_GROUP_ID, artifact_id=DIRECTOR_PLUGIN_ARTIFACT_ID)
    )
    plugin.add_execution(
        PluginExecution(id=MATERIALIZE_GOAL, goals=[MATERIALIZE_GOAL], configuration=config)
    )
    plugin.add_execution(
        PluginExecution(id=ARCHIVE_GOAL, goals=[ARCHIVE_GOAL], configuration=config)
    )
    return build


class ModelReader:
    """
    Reads descriptor projects into ProjectModel instances.

    Args:
        locator: Finds descriptors; defaults to DescriptorLocator()
        registry: Chooses readers for parent descriptors; defaults to this
                  reader for native descriptors and PomReader for pom.xml
        settings: ReaderSettings, defaults to ReaderSettings()
    """

    def __init__(
        self,
        locator: Optional[DescriptorLocator] = None,
        registry: Optional[ReaderRegistry] = None,
        settings: Optional[ReaderSettings] = None,
    ):
        self.locator = locator if locator is not None else DescriptorLocator()
        if registry is None:
            registry = ReaderRegistry(self)
            registry.register(POM_FILENAME, PomReader())
        self.registry = registry
        self.settings = settings if settings is not None else ReaderSettings()
        self._dispatch: dict[ProjectDescriptorKind, Callable[[Descriptor, int], ProjectModel]] = {
            ProjectDescriptorKind.MODULE: self._read_manifest,
            ProjectDescriptorKind.FEATURE: self._read_feature,
            ProjectDescriptorKind.PRODUCT: self._read_product,
            ProjectDescriptorKind.CATEGORY: self._read_category,
        }

    def synthesize(self, project_root: Union[str, Path], depth: int = 0) -> ProjectModel:
        """
        Build the model for a project directory.

        Raises:
            NoDescriptorFound: If the directory holds no known descriptor.
            MissingRequiredField, ParentNotFound, MalformedDescriptor, OSError:
                From the descriptor or any of its ancestors.
        """
        project_root = Path(project_root)
        descriptor = self.locator.locate(project_root)
        if descriptor is None:
            raise NoDescriptorFound(project_root)
        return self.read_descriptor(descriptor, depth)

    def read(self, path: Union[str, Path], depth: int = 0) -> ProjectModel:
        """Read a descriptor file, or a project directory."""
        path = Path(path)
        if path.is_dir():
            return self.synthesize(path, depth)
        descriptor = descriptor_for_path(path)
        if descriptor is None or not path.is_file():
            raise NoDescriptorFound(path)
        return self.read_descriptor(descriptor, depth)

    def read_descriptor(self, descriptor: Descriptor, depth: int = 0) -> ProjectModel:
        logger.debug("Reading %s descriptor %s", descriptor.kind.value, descriptor.path)
        return self._dispatch[descriptor.kind](descriptor, depth)

    def resolve_parent(self, project_root: Path, depth: int = 0) -> ParentReference:
        """
        Read the project in the parent directory and return a reference to it.

        groupId and version fall back to the ancestor's own parent reference
        when the ancestor does not declare them.
        """
        # assumption/limitation: the parent must be physically located in
        # the parent directory
        next_depth = depth + 1
        if next_depth > self.settings.max_parent_depth:
            raise ParentChainTooDeep(project_root, self.settings.max_parent_depth)

        parent_path = self.locator.locate_parent_descriptor(project_root)
        if parent_path is None:
            raise ParentNotFound(Path(os.path.abspath(project_root)).parent)

        logger.debug("Resolving parent of %s from %s", project_root, parent_path)
        reader = self.registry.reader_for(parent_path)
        parent_model = reader.read(parent_path, depth=next_depth)

        group_id = parent_model.group_id
        if group_id is None and parent_model.parent is not None:
            # must be inherited from grandparent
            group_id = parent_model.parent.group_id
        if not group_id:
            raise MissingRequiredField(
                "groupId", parent_path, f"Parent {parent_path} does not define or inherit a groupId"
            )

        version = parent_model.version
        if version is None and parent_model.parent is not None:
            version = parent_model.parent.version
        if not version:
            raise MissingRequiredField(
                "version", parent_path, f"Parent {parent_path} does not define or inherit a version"
            )

        return ParentReference(
            group_id=group_id, artifact_id=parent_model.artifact_id, version=version
        )

    def _read_manifest(self, descriptor: Descriptor, depth: int) -> ProjectModel:
        manifest_file = descriptor.path
        headers = manifest.read_manifest(manifest_file)
        symbolic_name = manifest.bundle_symbolic_name(headers)
        project_root = descriptor.project_root
        parent = self.resolve_parent(project_root, depth)
        version = headers.require(manifest.BUNDLE_VERSION)

        localization = headers.get(manifest.BUNDLE_LOCALIZATION)
        name = resolve_localized(headers.get(manifest.BUNDLE_NAME), project_root, localization)
        vendor = resolve_localized(headers.get(manifest.BUNDLE_VENDOR), project_root, localization)

        return ProjectModel(
            artifact_id=symbolic_name,
            version=normalize_version(version),
            packaging=packaging_for(symbolic_name),
            name=name if name is not None else symbolic_name,
            organization=Organization(vendor) if vendor is not None else None,
            parent=parent,
            source_location=manifest_file,
        )

    def _read_xml_descriptor(
        self,
        descriptor: Descriptor,
        depth: int,
        packaging: str,
        id_attribute: str,
        version_attribute: str,
        name_attribute: Optional[str],
        vendor_attribute: Optional[str],
    ) -> ProjectModel:
        xml_file = descriptor.path
        root = read_root_element(xml_file)
        parent = self.resolve_parent(descriptor.project_root, depth)
        artifact_id = require_attribute(root, id_attribute, xml_file)
        version = require_attribute(root, version_attribute, xml_file)

        name = None
        if name_attribute is not None:
            name = get_attribute(root, name_attribute)
        vendor = None
        if vendor_attribute is not None:
            vendor = get_attribute(root, vendor_attribute)

        return ProjectModel(
            artifact_id=artifact_id,
            version=normalize_version(version),
            packaging=packaging,
            name=name if name is not None else artifact_id,
            organization=Organization(vendor) if vendor is not None else None,
            parent=parent,
            source_location=xml_file,
        )

    def _read_feature(self, descriptor: Descriptor, depth: int) -> ProjectModel:
        return self._read_xml_descriptor(
            descriptor, depth, PACKAGING_FEATURE, "id", "version", "label", "provider-name"
        )

    def _read_product(self, descriptor: Descriptor, depth: int) -> ProjectModel:
        model = self._read_xml_descriptor(
            descriptor, depth, PACKAGING_REPOSITORY, "uid", "version", "name", None
        )
        return dataclasses.replace(model, build=product_build(model.artifact_id))

    def _read_category(self, descriptor: Descriptor, depth: int) -> ProjectModel:
        # category.xml has no id or version of its own
        category_xml = descriptor.path
        read_root_element(category_xml)
        project_root = descriptor.project_root
        parent = self.resolve_parent(project_root, depth)
        project_name = read_project_name(project_root)
        return ProjectModel(
            artifact_id=project_name,
            version=parent.version,
            packaging=PACKAGING_REPOSITORY,
            name=project_name,
            parent=parent,
            source_location=category_xml,
        )


def read_model(
    project_root: Union[str, Path], settings: Optional[ReaderSettings] = None
) -> ProjectModel:
    """
    Convenience function to synthesize the model of one project directory.

    Args:
        project_root: Directory containing META-INF/MANIFEST.MF, feature.xml,
                      a .product file or category.xml.
        settings: Optional ReaderSettings.
    """
    return ModelReader(settings=settings).synthesize(project_root)
