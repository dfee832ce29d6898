"""
Shared fixtures for the pomless test suite.

ProjectTreeTestCase gives every test a fresh temporary directory and a few
helpers to lay out descriptor projects inside it.
"""

import tempfile
import textwrap
import unittest
from pathlib import Path
from typing import Optional

ROOT_POM = """\
<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>{group_id}</groupId>
  <artifactId>{artifact_id}</artifactId>
  <version>{version}</version>
  <packaging>pom</packaging>
</project>
"""


class ProjectTreeTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, relpath: str, content: str, encoding: str = "utf-8") -> Path:
        path = self.root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding=encoding)
        return path

    def write_root_pom(
        self,
        relpath: str = "pom.xml",
        group_id: str = "org.example",
        artifact_id: str = "parent",
        version: str = "1.0.0-SNAPSHOT",
    ) -> Path:
        return self.write(
            relpath,
            ROOT_POM.format(group_id=group_id, artifact_id=artifact_id, version=version),
        )

    def write_manifest(self, project: str, headers: str) -> Path:
        return self.write(f"{project}/META-INF/MANIFEST.MF", headers)

    def write_feature(
        self,
        project: str,
        feature_id: Optional[str] = "org.example.feature",
        version: Optional[str] = "1.0.0.qualifier",
        extra: str = "",
    ) -> Path:
        attributes = []
        if feature_id is not None:
            attributes.append(f'id="{feature_id}"')
        if version is not None:
            attributes.append(f'version="{version}"')
        if extra:
            attributes.append(extra)
        return self.write(
            f"{project}/feature.xml",
            f'<?xml version="1.0" encoding="UTF-8"?>\n<feature {" ".join(attributes)}>\n</feature>\n',
        )
