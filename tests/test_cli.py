import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest import mock

from fakes import FakeArchiver
from modpacker import cli
from modpacker.core import settings as settings_module
from modpacker.core.settings import default_settings


class TestCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        for name in ("tools", "mods", "game"):
            (self.root / name).mkdir()
        self.settings = replace(
            default_settings(),
            staging_dir=str(self.root / "staging"),
            game_ini_path=str(self.root / "Custom.ini"),
        )
        self.archiver = FakeArchiver()

        patches = [
            mock.patch("modpacker.cli.load_settings", return_value=self.settings),
            mock.patch("modpacker.cli.Archiver", return_value=self.archiver),
            mock.patch("modpacker.ui.dialogs.copy_to_clipboard"),
            mock.patch("modpacker.ui.dialogs.open_in_editor", return_value=True),
            mock.patch("modpacker.ui.dialogs.pick_folder", return_value=None),
            mock.patch("builtins.print"),
        ]
        self.mocks = [p.start() for p in patches]
        self.pick_folder = self.mocks[4]
        for p in patches:
            self.addCleanup(p.stop)
        self.addCleanup(self._tmp.cleanup)

    def _argv(self, *extra):
        return [
            "--archiver", str(self.root / "tools"),
            "--mods", str(self.root / "mods"),
            "--game", str(self.root / "game"),
            *extra,
        ]

    def test_full_run_with_strings_textures_and_other(self):
        mods = self.root / "mods"
        (mods / "Loose" / "Strings").mkdir(parents=True)
        (mods / "Loose" / "Strings" / "mod_en.strings").write_bytes(b"s")
        (mods / "Loose" / "Textures").mkdir()
        (mods / "Loose" / "Textures" / "a.dds").write_bytes(b"t")
        (mods / "Loose" / "Meshes").mkdir()
        (mods / "Loose" / "Meshes" / "a.nif").write_bytes(b"m")

        rc = cli.main(self._argv())

        self.assertEqual(rc, 0)
        data = self.root / "game" / "Data"
        self.assertEqual((data / "strings" / "mod_en.strings").read_bytes(), b"s")
        self.assertEqual(
            [(c["sources"], c["format"]) for c in self.archiver.created],
            [(["textures"], "DDS"), (["meshes"], "General")],
        )
        self.assertTrue((self.root / "staging" / "meshes").is_dir())
        self.pick_folder.assert_not_called()
        # config file was missing, so the block went to the clipboard
        self.mocks[2].assert_called_once()

    def test_cleanup_removes_staging(self):
        (self.root / "mods" / "meshes").mkdir()
        rc = cli.main(self._argv("--cleanup", "--no-clipboard"))
        self.assertEqual(rc, 0)
        self.assertFalse((self.root / "staging").exists())
        self.mocks[2].assert_not_called()

    def test_probe_failure_exits_1_without_staging(self):
        self.archiver.probe_ok = False
        (self.root / "staging").mkdir()
        (self.root / "staging" / "keep.txt").write_text("untouched")

        rc = cli.main(self._argv())

        self.assertEqual(rc, 1)
        self.assertEqual((self.root / "staging" / "keep.txt").read_text(), "untouched")
        self.assertEqual(self.archiver.created, [])

    def test_missing_folder_exits_1(self):
        rc = cli.main(["--archiver", str(self.root / "tools"), "--mods", str(self.root / "nope"), "--game", str(self.root / "game")])
        self.assertEqual(rc, 1)
        self.assertFalse((self.root / "staging").exists())

    def test_pickers_fill_missing_paths(self):
        self.pick_folder.return_value = str(self.root / "game")
        (self.root / "mods" / "meshes").mkdir()

        rc = cli.main(["--archiver", str(self.root / "tools"), "--mods", str(self.root / "mods")])

        self.assertEqual(rc, 0)
        self.assertEqual(self.pick_folder.call_count, 1)

    def test_interactive_asks_for_every_path(self):
        self.pick_folder.return_value = None
        (self.root / "mods" / "meshes").mkdir()
        rc = cli.main(self._argv("--interactive"))
        # cancelled pickers keep the values given on the command line
        self.assertEqual(rc, 0)
        self.assertEqual(self.pick_folder.call_count, 3)

    def test_strict_requires_all_paths(self):
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--strict", "--mods", str(self.root / "mods")])
        self.assertEqual(ctx.exception.code, 2)
        self.pick_folder.assert_not_called()

    def test_archiver_failure_exits_2(self):
        (self.root / "mods" / "Broken.ba2").write_bytes(b"BTDX")
        self.archiver.fail_on = {"Broken.ba2"}
        rc = cli.main(self._argv())
        self.assertEqual(rc, 2)

    def test_save_shortcut_in_working_directory(self):
        (self.root / "mods" / "meshes").mkdir()
        with mock.patch("modpacker.cli.os.getcwd", return_value=str(self.root)):
            rc = cli.main(self._argv("--save-shortcut"))
        self.assertEqual(rc, 0)
        self.assertTrue(any(p.name.lower().startswith("modpacker.") for p in self.root.iterdir()))

    def test_malformed_settings_file_exits_1(self):
        bad = self.root / "settings.json"
        bad.write_text("{not json", encoding="utf-8")
        with mock.patch("modpacker.cli.load_settings", new=settings_module.load_settings):
            rc = cli.main(self._argv("--settings", str(bad)))
        self.assertEqual(rc, 1)
        self.assertFalse((self.root / "staging").exists())
        self.assertEqual(self.archiver.created, [])

    def test_missing_settings_file_exits_1(self):
        with mock.patch("modpacker.cli.load_settings", new=settings_module.load_settings):
            rc = cli.main(self._argv("--settings", str(self.root / "none.json")))
        self.assertEqual(rc, 1)
        self.assertEqual(self.archiver.created, [])

    def test_write_settings_creates_missing_file(self):
        target = self.root / "cfg" / "settings.json"
        with mock.patch("modpacker.cli.load_settings", new=settings_module.load_settings):
            rc = cli.main(["--write-settings", "--settings", str(target)])
        self.assertEqual(rc, 0)
        self.assertEqual(settings_module.load_settings(str(target)), default_settings())

    def test_write_settings(self):
        target = self.root / "settings.json"
        with mock.patch("modpacker.cli.save_settings", return_value=target) as save:
            rc = cli.main(["--write-settings", "--settings", str(target)])
        self.assertEqual(rc, 0)
        save.assert_called_once_with(str(target), self.settings)
        self.assertEqual(self.archiver.created, [])


if __name__ == "__main__":
    unittest.main()
