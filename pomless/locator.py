"""
pomless.locator - Find descriptor files in project directories

The probe order decides which descriptor describes a directory when more
than one is present:

    1. META-INF/MANIFEST.MF
    2. feature.xml
    3. *.product (files starting with .polyglot are ignored)
    4. category.xml

Parent lookup additionally accepts a plain pom.xml, which takes precedence
over native descriptors in the parent directory.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pomless.config import (
    CATEGORY_FILENAME,
    FEATURE_FILENAME,
    IGNORED_PRODUCT_PREFIX,
    MANIFEST_PATH,
    POM_FILENAME,
    PRODUCT_SUFFIX,
)
from pomless.model import Descriptor, ProjectDescriptorKind

logger = logging.getLogger(__name__)


def find_product_file(project_root: Path) -> Optional[Path]:
    """
    Return the product file of a directory, or None.

    Candidates are sorted by name so the choice does not depend on the
    order the filesystem lists them in.
    """
    try:
        entries = os.listdir(project_root)
    except (FileNotFoundError, NotADirectoryError):
        return None

    candidates = sorted(
        name
        for name in entries
        if name.endswith(PRODUCT_SUFFIX)
        and not name.startswith(IGNORED_PRODUCT_PREFIX)
        and (project_root / name).is_file()
    )
    if not candidates:
        return None
    if len(candidates) > 1:
        logger.warning(
            "Several product files in %s, using %s (ignoring %s)",
            project_root,
            candidates[0],
            ", ".join(candidates[1:]),
        )
    return project_root / candidates[0]


def probe(project_root: Path) -> Optional[Descriptor]:
    """Detect which native descriptor a project directory holds."""
    manifest = project_root / MANIFEST_PATH
    if manifest.is_file():
        return Descriptor(ProjectDescriptorKind.MODULE, manifest)

    feature = project_root / FEATURE_FILENAME
    if feature.is_file():
        return Descriptor(ProjectDescriptorKind.FEATURE, feature)

    product = find_product_file(project_root)
    if product is not None:
        return Descriptor(ProjectDescriptorKind.PRODUCT, product)

    category = project_root / CATEGORY_FILENAME
    if category.is_file():
        return Descriptor(ProjectDescriptorKind.CATEGORY, category)

    return None


def descriptor_for_path(path: Path) -> Optional[Descriptor]:
    """Classify an already known native descriptor file by its name."""
    if path.name == "MANIFEST.MF" and path.parent.name == "META-INF":
        return Descriptor(ProjectDescriptorKind.MODULE, path)
    if path.name == FEATURE_FILENAME:
        return Descriptor(ProjectDescriptorKind.FEATURE, path)
    if path.name.endswith(PRODUCT_SUFFIX):
        return Descriptor(ProjectDescriptorKind.PRODUCT, path)
    if path.name == CATEGORY_FILENAME:
        return Descriptor(ProjectDescriptorKind.CATEGORY, path)
    return None


class DescriptorLocator:
    """
    Default filesystem locator.

    Replace it with any object providing locate() and
    locate_parent_descriptor() to change where descriptors are looked for.
    """

    def locate(self, directory: Path) -> Optional[Descriptor]:
        """The native descriptor describing directory, or None."""
        return probe(Path(directory))

    def locate_descriptor_file(self, directory: Path) -> Optional[Path]:
        """Any descriptor file in directory: pom.xml first, then native ones."""
        directory = Path(directory)
        pom = directory / POM_FILENAME
        if pom.is_file():
            return pom
        descriptor = probe(directory)
        if descriptor is not None:
            return descriptor.path
        return None

    def locate_parent_descriptor(self, project_root: Path) -> Optional[Path]:
        """
        The descriptor file physically located in the parent of project_root.

        Returns None at the filesystem root or when the parent holds nothing.
        """
        project_root = Path(os.path.abspath(project_root))
        parent = project_root.parent
        if parent == project_root:
            return None
        return self.locate_descriptor_file(parent)
