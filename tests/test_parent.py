"""
Tests for parent resolution across directory levels.
"""

import unittest

from pomless.config import ReaderSettings
from pomless.errors import MissingRequiredField, ParentChainTooDeep, ParentNotFound
from pomless.reader import ModelReader, ReaderRegistry, read_model
from support import ProjectTreeTestCase

INTERMEDIATE_POM = """\
<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <parent>
    <groupId>g</groupId>
    <artifactId>root</artifactId>
    <version>1.0</version>
  </parent>
  <artifactId>bundles</artifactId>
  <packaging>pom</packaging>
</project>
"""

MANIFEST = "Bundle-SymbolicName: org.example.core\nBundle-Version: 1.0.0.qualifier\n"


class TestParentChain(ProjectTreeTestCase):
    def test_three_levels_through_pom(self):
        """groupId and version come from the grandparent when the parent declares neither."""
        self.write_root_pom(group_id="g", artifact_id="root", version="1.0")
        self.write("bundles/pom.xml", INTERMEDIATE_POM)
        self.write_manifest("bundles/core", MANIFEST)

        model = read_model(self.root / "bundles" / "core")
        self.assertEqual(model.parent.group_id, "g")
        self.assertEqual(model.parent.version, "1.0")
        self.assertEqual(model.parent.artifact_id, "bundles")

    def test_three_levels_through_native_descriptor(self):
        """A feature parent inherits groupId itself; its children inherit it from the feature."""
        self.write_root_pom(group_id="g", artifact_id="root", version="1.0")
        self.write_feature("outer", feature_id="org.example.outer", version="2.0.0.qualifier")
        self.write_feature("outer/inner", feature_id="org.example.inner")

        model = read_model(self.root / "outer" / "inner")
        self.assertEqual(model.parent.group_id, "g")
        self.assertEqual(model.parent.artifact_id, "org.example.outer")
        self.assertEqual(model.parent.version, "2.0.0-SNAPSHOT")

    def test_category_takes_version_through_chain(self):
        self.write_root_pom(group_id="g", artifact_id="root", version="1.0")
        self.write("sites/pom.xml", INTERMEDIATE_POM)
        self.write("sites/site/category.xml", "<site/>")
        self.write(
            "sites/site/.project", "<projectDescription><name>site</name></projectDescription>"
        )
        model = read_model(self.root / "sites" / "site")
        self.assertEqual(model.version, "1.0")
        self.assertEqual(model.effective_group_id, "g")

    def test_no_parent_descriptor(self):
        self.write_manifest("lonely/core", MANIFEST)
        with self.assertRaises(ParentNotFound) as ctx:
            read_model(self.root / "lonely" / "core")
        self.assertEqual(ctx.exception.path, self.root / "lonely")

    def test_failure_in_ancestor_aborts(self):
        """An ancestor without a parent of its own fails the whole synthesis."""
        self.write_feature("outer")
        self.write_feature("outer/inner")
        with self.assertRaises(ParentNotFound):
            read_model(self.root / "outer" / "inner")

    def test_parent_without_group_id(self):
        self.write(
            "pom.xml",
            "<project><artifactId>orphan</artifactId><version>1.0</version></project>",
        )
        self.write_manifest("core", MANIFEST)
        with self.assertRaises(MissingRequiredField) as ctx:
            read_model(self.root / "core")
        self.assertEqual(ctx.exception.field, "groupId")

    def test_parent_without_version(self):
        self.write(
            "pom.xml",
            "<project><groupId>g</groupId><artifactId>orphan</artifactId></project>",
        )
        self.write_manifest("core", MANIFEST)
        with self.assertRaises(MissingRequiredField) as ctx:
            read_model(self.root / "core")
        self.assertEqual(ctx.exception.field, "version")

    def test_depth_limit(self):
        self.write_root_pom(group_id="g", artifact_id="root", version="1.0")
        self.write_feature("a", feature_id="a")
        self.write_feature("a/b", feature_id="b")
        self.write_feature("a/b/c", feature_id="c")

        reader = ModelReader(settings=ReaderSettings(max_parent_depth=2))
        with self.assertRaises(ParentChainTooDeep) as ctx:
            reader.synthesize(self.root / "a" / "b" / "c")
        self.assertEqual(ctx.exception.limit, 2)

        model = ModelReader(settings=ReaderSettings(max_parent_depth=3)).synthesize(
            self.root / "a" / "b" / "c"
        )
        self.assertEqual(model.parent.artifact_id, "b")


class RecordingReader:
    """Stands in for a reader of a foreign descriptor format."""

    def __init__(self, model):
        self.model = model
        self.calls = []

    def read(self, path, depth=0):
        self.calls.append((path, depth))
        return self.model


class TestCustomCollaborators(ProjectTreeTestCase):
    def test_registered_reader_used_for_parent(self):
        from pomless.model import ProjectModel

        self.write("pom.xml", "<project/>")
        self.write_manifest("core", MANIFEST)

        parent_model = ProjectModel(
            group_id="custom", artifact_id="custom-parent", version="5.0", packaging="pom",
            name="custom-parent",
        )
        custom = RecordingReader(parent_model)
        reader = ModelReader()
        reader.registry.register("pom.xml", custom)

        model = reader.synthesize(self.root / "core")
        self.assertEqual(model.parent.group_id, "custom")
        self.assertEqual(model.parent.version, "5.0")
        self.assertEqual(custom.calls, [(self.root / "pom.xml", 1)])

    def test_custom_locator(self):
        from pathlib import Path

        self.write_root_pom(group_id="elsewhere", artifact_id="root", version="7")
        self.write_manifest("deep/down/core", MANIFEST)
        root_pom = self.root / "pom.xml"

        class FixedParentLocator:
            def locate(self, directory):
                from pomless.locator import probe

                return probe(Path(directory))

            def locate_parent_descriptor(self, project_root):
                return root_pom

        reader = ModelReader(locator=FixedParentLocator())
        model = reader.synthesize(self.root / "deep" / "down" / "core")
        self.assertEqual(model.parent.group_id, "elsewhere")

    def test_explicit_registry(self):
        from pomless.pom import PomReader

        self.write_root_pom(group_id="g", artifact_id="root", version="1.0")
        self.write_feature("feature")
        reader = ModelReader()
        registry = ReaderRegistry(reader)
        registry.register("pom.xml", PomReader())
        self.assertIsInstance(registry.reader_for(self.root / "pom.xml"), PomReader)
        self.assertIs(registry.reader_for(self.root / "feature" / "feature.xml"), reader)


if __name__ == "__main__":
    unittest.main()
