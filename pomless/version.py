"""
pomless.version - Version and packaging rules

PDE versions carry a literal ".qualifier" segment for development builds;
Maven spells the same thing "-SNAPSHOT". The rewrite is purely textual.
"""

QUALIFIER_SUFFIX = ".qualifier"
SNAPSHOT_SUFFIX = "-SNAPSHOT"
TEST_BUNDLE_SUFFIX = ".tests"

PACKAGING_PLUGIN = "eclipse-plugin"
PACKAGING_TEST_PLUGIN = "eclipse-test-plugin"
PACKAGING_FEATURE = "eclipse-feature"
PACKAGING_REPOSITORY = "eclipse-repository"


def normalize_version(version: str) -> str:
    """
    Convert a PDE version to a Maven version.

    Example:
        "1.0.0.qualifier" -> "1.0.0-SNAPSHOT"
        "1.0.0"           -> "1.0.0"
    """
    if version.endswith(QUALIFIER_SUFFIX):
        return version[: -len(QUALIFIER_SUFFIX)] + SNAPSHOT_SUFFIX
    return version


def packaging_for(symbolic_name: str) -> str:
    """Test bundles are recognized by their ".tests" name suffix."""
    if symbolic_name.endswith(TEST_BUNDLE_SUFFIX):
        return PACKAGING_TEST_PLUGIN
    return PACKAGING_PLUGIN
