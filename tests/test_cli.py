"""
Tests for the pomless command line.
"""

import contextlib
import io
import json
import unittest

from pomless.cli import _main, create_parser
from support import ProjectTreeTestCase


def run_cli(argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
        code = _main(argv)
    return code, stdout.getvalue(), stderr.getvalue()


class TestParser(unittest.TestCase):
    def test_subcommands(self):
        args = create_parser().parse_args(["--max-depth", "4", "pom", "dir", "-o", "out.xml"])
        self.assertEqual(args.subcommand, "pom")
        self.assertEqual(args.directory, "dir")
        self.assertEqual(args.output, "out.xml")
        self.assertEqual(args.max_depth, 4)


class TestCommands(ProjectTreeTestCase):
    def setUp(self):
        super().setUp()
        self.write_root_pom(group_id="org.example", version="1.0.0-SNAPSHOT")
        self.write_feature("feature")

    def test_locate(self):
        code, out, _ = run_cli(["locate", str(self.root / "feature")])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("feature\t"))

    def test_locate_nothing(self):
        code, _, err = run_cli(["locate", str(self.root)])
        self.assertEqual(code, 1)
        self.assertIn("no descriptor", err)

    def test_show(self):
        code, out, _ = run_cli(["show", str(self.root / "feature")])
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["artifactId"], "org.example.feature")
        self.assertEqual(data["packaging"], "eclipse-feature")
        self.assertEqual(data["parent"]["groupId"], "org.example")

    def test_show_error(self):
        (self.root / "empty").mkdir()
        code, out, err = run_cli(["show", str(self.root / "empty")])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error:", err)

    def test_pom_to_stdout(self):
        code, out, _ = run_cli(["pom", str(self.root / "feature")])
        self.assertEqual(code, 0)
        self.assertIn("<artifactId>org.example.feature</artifactId>", out)

    def test_pom_to_file(self):
        target = self.root / "out.xml"
        code, out, _ = run_cli(["pom", str(self.root / "feature"), "-o", str(target)])
        self.assertEqual(code, 0)
        self.assertTrue(target.is_file())
        self.assertIn("Wrote", out)

    def test_max_depth_rejected(self):
        code, _, err = run_cli(["--max-depth", "0", "show", str(self.root / "feature")])
        self.assertEqual(code, 2)
        self.assertIn("--max-depth", err)

    def test_no_subcommand(self):
        code, out, _ = run_cli([])
        self.assertEqual(code, 2)
        self.assertIn("usage", out)


if __name__ == "__main__":
    unittest.main()
