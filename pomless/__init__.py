"""
pomless - Build-project models from Eclipse descriptors

This package reads the descriptor an Eclipse/PDE project already has and
synthesizes the build model a POM would otherwise have to spell out:

- reader.py: ModelReader, the descriptor-kind dispatch and parent resolution
- manifest.py: META-INF/MANIFEST.MF header parsing
- xmldesc.py: feature.xml, *.product, category.xml and .project access
- l10n.py: %key lookups in bundle localization files
- version.py: ".qualifier" to "-SNAPSHOT" and packaging rules
- locator.py: which descriptor a directory holds
- pom.py: reading Maven parents, rendering models as POM XML
- cli.py: the `pomless` command

Usage:
    from pomless import ModelReader, read_model

    model = read_model("path/to/bundle")
    print(model.artifact_id, model.version, model.packaging)
"""

from pomless.config import (
    DEFAULT_LOCALIZATION,
    DEFAULT_MAX_PARENT_DEPTH,
    ReaderSettings,
)
from pomless.errors import (
    MalformedDescriptor,
    MissingRequiredField,
    ModelError,
    NoDescriptorFound,
    ParentChainTooDeep,
    ParentNotFound,
)
from pomless.l10n import parse_properties, resolve_localized
from pomless.locator import DescriptorLocator, find_product_file, probe
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
from pomless.pom import PomReader, render_pom, write_pom
from pomless.reader import ModelReader, ReaderRegistry, product_build, read_model
from pomless.version import normalize_version, packaging_for

__version__ = "0.1.0"

__all__ = [
    # Reader
    "ModelReader",
    "ReaderRegistry",
    "read_model",
    "product_build",
    # Model
    "ProjectModel",
    "ProjectDescriptorKind",
    "Descriptor",
    "ParentReference",
    "Organization",
    "Build",
    "Plugin",
    "PluginExecution",
    "ConfigNode",
    # Locator
    "DescriptorLocator",
    "probe",
    "find_product_file",
    # Normalization
    "normalize_version",
    "packaging_for",
    "resolve_localized",
    "parse_properties",
    # POM
    "PomReader",
    "render_pom",
    "write_pom",
    # Config
    "ReaderSettings",
    "DEFAULT_LOCALIZATION",
    "DEFAULT_MAX_PARENT_DEPTH",
    # Errors
    "ModelError",
    "NoDescriptorFound",
    "MissingRequiredField",
    "ParentNotFound",
    "ParentChainTooDeep",
    "MalformedDescriptor",
]
