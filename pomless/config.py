"""
pomless.config - Descriptor file names and reader settings

This module holds the well-known file names the reader probes for and the
ReaderSettings dataclass that tunes how far the parent walk may go.

The project layouts recognized:
    bundle/META-INF/MANIFEST.MF     # module manifest
    feature/feature.xml             # feature descriptor
    product/<name>.product          # product descriptor
    site/category.xml + .project    # category descriptor
    parent/pom.xml                  # plain Maven parent
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Descriptor file names, relative to a project root
MANIFEST_PATH = os.path.join("META-INF", "MANIFEST.MF")
FEATURE_FILENAME = "feature.xml"
CATEGORY_FILENAME = "category.xml"
PRODUCT_SUFFIX = ".product"
IGNORED_PRODUCT_PREFIX = ".polyglot"
PROJECT_FILENAME = ".project"
POM_FILENAME = "pom.xml"

# Localization bundle used when a manifest has no Bundle-Localization header
DEFAULT_LOCALIZATION = "OSGI-INF/l10n/bundle.properties"

DEFAULT_MAX_PARENT_DEPTH = 32
MAX_PARENT_DEPTH_ENV = "POMLESS_MAX_PARENT_DEPTH"


@dataclass(frozen=True)
class ReaderSettings:
    """
    Settings for a ModelReader.

    Fields:
        max_parent_depth: How many ancestor levels the parent walk may visit
                          before giving up. Guards against cyclic symlinked trees.
    """

    max_parent_depth: int = DEFAULT_MAX_PARENT_DEPTH

    def __post_init__(self) -> None:
        if self.max_parent_depth < 1:
            raise ValueError(
                f"max_parent_depth must be at least 1, got {self.max_parent_depth}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReaderSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ValueError: If POMLESS_MAX_PARENT_DEPTH is set but not a positive integer.
        """
        if environ is None:
            environ = os.environ

        raw = environ.get(MAX_PARENT_DEPTH_ENV)
        if raw is None or not raw.strip():
            return cls()

        try:
            depth = int(raw)
        except ValueError as e:
            raise ValueError(
                f"{MAX_PARENT_DEPTH_ENV} must be an integer, got {raw!r}"
            ) from e
        return cls(max_parent_depth=depth)
