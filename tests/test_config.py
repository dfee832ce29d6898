"""
Tests for ReaderSettings.
"""

import unittest

from pomless.config import DEFAULT_MAX_PARENT_DEPTH, MAX_PARENT_DEPTH_ENV, ReaderSettings


class TestReaderSettings(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(ReaderSettings().max_parent_depth, DEFAULT_MAX_PARENT_DEPTH)

    def test_from_env(self):
        settings = ReaderSettings.from_env({MAX_PARENT_DEPTH_ENV: "5"})
        self.assertEqual(settings.max_parent_depth, 5)

    def test_from_env_unset_or_blank(self):
        self.assertEqual(ReaderSettings.from_env({}), ReaderSettings())
        self.assertEqual(ReaderSettings.from_env({MAX_PARENT_DEPTH_ENV: " "}), ReaderSettings())

    def test_from_env_invalid(self):
        with self.assertRaises(ValueError):
            ReaderSettings.from_env({MAX_PARENT_DEPTH_ENV: "deep"})
        with self.assertRaises(ValueError):
            ReaderSettings.from_env({MAX_PARENT_DEPTH_ENV: "0"})


if __name__ == "__main__":
    unittest.main()
