import tempfile
import unittest
from pathlib import Path

from modcheck.errors import NotFoundError, ParseError
from modcheck.reader import get_dependency_groups, read_manifest

class TestReadManifest(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)

    def _write(self, content: str) -> Path:
        path = self.root / "package.json"
        path.write_text(content, encoding="utf-8")
        return path

    def test_reads_full_manifest(self):
        """All keys of the manifest are returned, not only the dependencies."""
        path = self._write("""{
            "name": "myproject",
            "version": "1.0.0",
            "scripts": {"test": "jest"},
            "dependencies": {"express": "^4.18.2"}
        }""")

        data = read_manifest(path)

        self.assertEqual(data["name"], "myproject")
        self.assertEqual(data["scripts"], {"test": "jest"})
        self.assertEqual(data["dependencies"], {"express": "^4.18.2"})

    def test_accepts_str_path(self):
        path = self._write("{}")
        self.assertEqual(read_manifest(str(path)), {})

    def test_reads_utf8(self):
        path = self._write('{"description": "café ☕"}')
        self.assertEqual(read_manifest(path)["description"], "café ☕")

    def test_missing_file_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            read_manifest(self.root / "missing.json")

    def test_directory_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            read_manifest(self.root)

    def test_invalid_json_raises_parse_error(self):
        path = self._write('{"dependencies": {')
        with self.assertRaises(ParseError):
            read_manifest(path)

    def test_non_object_raises_parse_error(self):
        """A JSON array is valid JSON but not a manifest."""
        path = self._write('["left-pad"]')
        with self.assertRaises(ParseError):
            read_manifest(path)


class TestGetDependencyGroups(unittest.TestCase):
    def test_returns_both_groups(self):
        deps, dev_deps = get_dependency_groups({
            "dependencies": {"express": "^4.18.2", "lodash": "~4.17.21"},
            "devDependencies": {"jest": "^29.0.0"}
        })

        self.assertEqual(deps, {"express": "^4.18.2", "lodash": "~4.17.21"})
        self.assertEqual(dev_deps, {"jest": "^29.0.0"})

    def test_missing_groups_default_to_empty(self):
        self.assertEqual(get_dependency_groups({}), ({}, {}))

    def test_null_group_defaults_to_empty(self):
        deps, dev_deps = get_dependency_groups({"dependencies": None, "devDependencies": {"jest": "1.0.0"}})
        self.assertEqual(deps, {})
        self.assertEqual(dev_deps, {"jest": "1.0.0"})

    def test_keeps_manifest_order(self):
        deps, _ = get_dependency_groups({"dependencies": {"b": "1", "a": "2", "c": "3"}})
        self.assertEqual(list(deps), ["b", "a", "c"])

    def test_group_not_an_object_raises_parse_error(self):
        with self.assertRaises(ParseError):
            get_dependency_groups({"dependencies": ["express"]})

    def test_falsy_non_object_group_raises_parse_error(self):
        """Only a missing or null group defaults to empty, not [] or false."""
        for bad in ([], False, "", 0):
            with self.subTest(bad=bad):
                with self.assertRaises(ParseError):
                    get_dependency_groups({"dependencies": bad})
                with self.assertRaises(ParseError):
                    get_dependency_groups({"devDependencies": bad})
