import os
import stat
import tempfile
import unittest
import uuid
from pathlib import Path

from Orchestrator.config import config
from Orchestrator.discovery import (
    LogicalApplication,
    discover,
    find_apps_folder,
    known_applications,
    list_candidates,
)


def _touch(folder, name, executable=True):
    path = Path(folder) / name
    path.write_bytes(b"MZ")
    if executable:
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    else:
        path.chmod(stat.S_IRUSR | stat.S_IWUSR)
    return path


class AppsFolderTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

    def test_walks_up_to_nearest_apps_folder(self):
        name = "Apps_" + uuid.uuid4().hex
        (self.root / name).mkdir()
        start = self.root / "bin" / "x64" / "Release"
        start.mkdir(parents=True)
        found = find_apps_folder(start, folder_name=name)
        self.assertEqual(found, (self.root / name).resolve())

    def test_prefers_closest_apps_folder(self):
        name = "Apps_" + uuid.uuid4().hex
        (self.root / name).mkdir()
        inner = self.root / "launcher"
        (inner / name).mkdir(parents=True)
        self.assertEqual(find_apps_folder(inner, folder_name=name), (inner / name).resolve())

    def test_missing_apps_folder_returns_none(self):
        self.assertIsNone(find_apps_folder(self.root, folder_name="Apps_" + uuid.uuid4().hex))

    def test_apps_file_is_not_a_folder(self):
        name = "Apps_" + uuid.uuid4().hex
        (self.root / name).write_text("not a dir", encoding="utf-8")
        self.assertIsNone(find_apps_folder(self.root, folder_name=name))

    def test_lists_windows_executables_excluding_launcher(self):
        _touch(self.root, "PowerStigConverterUI.exe")
        _touch(self.root, "orchestrator.EXE")
        _touch(self.root, "notes.txt")
        (self.root / "nested.exe").mkdir()
        names = [c.file_name_without_extension for c in list_candidates(self.root, "Orchestrator.exe", windows=True)]
        self.assertEqual(names, ["PowerStigConverterUI"])

    @unittest.skipIf(os.name == "nt", "execute bit is POSIX only")
    def test_lists_posix_files_with_execute_bit(self):
        _touch(self.root, "mof-inspector")
        _touch(self.root, "readme.md", executable=False)
        names = [c.file_name_without_extension for c in list_candidates(self.root, "python3", windows=False)]
        self.assertEqual(names, ["mof-inspector"])

    def test_listing_is_not_recursive(self):
        sub = self.root / "sub"
        sub.mkdir()
        _touch(sub, "Hidden.exe")
        self.assertEqual(list_candidates(self.root, "launcher.exe", windows=True), [])

    def test_missing_folder_lists_nothing(self):
        self.assertEqual(list_candidates(None), [])
        self.assertEqual(list_candidates(self.root / "gone", "x.exe", windows=True), [])


class CatalogTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        self._saved = (config.runtime_log_enabled, config.apps_folder_name)
        config.runtime_log_enabled = "0"
        config.apps_folder_name = "Apps_" + uuid.uuid4().hex

    def tearDown(self):
        config.runtime_log_enabled, config.apps_folder_name = self._saved

    def test_discovers_both_known_apps(self):
        apps_dir = self.root / config.apps_folder_name
        apps_dir.mkdir()
        _touch(apps_dir, "PowerStigConverterUI.exe")
        _touch(apps_dir, "MOF-Inspector.exe")
        _touch(apps_dir, "Orchestrator.exe")

        apps = discover(base_dir=self.root, names=("PowerStig Converter UI", "MOF Inspector"),
                        current_executable="Orchestrator.exe")

        by_name = {a.display_name: a for a in apps}
        self.assertEqual(Path(by_name["PowerStig Converter UI"].resolved_path).name, "PowerStigConverterUI.exe")
        self.assertEqual(Path(by_name["MOF Inspector"].resolved_path).name, "MOF-Inspector.exe")
        self.assertGreaterEqual(by_name["MOF Inspector"].match_confidence, 100)
        self.assertTrue(all(a.is_available() for a in apps))
        self.assertEqual(by_name["MOF Inspector"].label(), "MOF Inspector")

    def test_unmatched_app_is_marked_not_found(self):
        apps_dir = self.root / config.apps_folder_name
        apps_dir.mkdir()
        _touch(apps_dir, "Unrelated.exe")
        apps = discover(base_dir=self.root, names=("Foo Bar",), current_executable="launcher.exe")
        self.assertIsNone(apps[0].resolved_path)
        self.assertEqual(apps[0].label(), "Foo Bar (not found)")

    def test_no_apps_folder_leaves_everything_unresolved(self):
        apps = discover(base_dir=self.root, names=("PowerStig Converter UI", "MOF Inspector"))
        self.assertEqual([a.resolved_path for a in apps], [None, None])
        self.assertFalse(any(a.is_available() for a in apps))

    def test_availability_is_rechecked(self):
        target = _touch(self.root, "Tool.exe")
        app = LogicalApplication("Tool", resolved_path=str(target), match_confidence=100)
        self.assertTrue(app.is_available())
        target.unlink()
        self.assertFalse(app.is_available())
        self.assertEqual(app.label(), "Tool (not found)")

    def test_known_applications_from_config(self):
        saved = config.known_apps
        try:
            config.known_apps = "Alpha Tool, Beta ,"
            self.assertEqual(known_applications(), ("Alpha Tool", "Beta"))
            config.known_apps = ""
            self.assertEqual(known_applications(), ("PowerStig Converter UI", "MOF Inspector"))
        finally:
            config.known_apps = saved


if __name__ == "__main__":
    unittest.main()
