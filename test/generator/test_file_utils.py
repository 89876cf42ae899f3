import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from unit_test_generator.errors import ErrorCode, GeneratorError
from unit_test_generator.generator import file_utils


class FileUtilsTest(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_ensure_directory_exists_creates_and_tolerates_existing(self):
        target = self.test_dir / "src" / "__tests__"
        file_utils.ensure_directory_exists(target)
        self.assertTrue(target.is_dir())
        file_utils.ensure_directory_exists(target)

    def test_ensure_directory_exists_failure(self):
        blocker = self.test_dir / "file"
        blocker.touch()
        with self.assertRaises(GeneratorError) as cm:
            file_utils.ensure_directory_exists(blocker / "__tests__")
        self.assertEqual(
            cm.exception.code, ErrorCode.UNABLE_TO_CREATE_TEST_DIRECTORY
        )

    def test_warn_if_file_exists_missing_file(self):
        confirm = mock.Mock()
        file_utils.warn_if_file_exists(self.test_dir / "a.spec.ts", confirm)
        confirm.assert_not_called()

    def test_warn_if_file_exists_confirmed(self):
        path = self.test_dir / "a.spec.ts"
        path.touch()
        confirm = mock.Mock(return_value=True)
        file_utils.warn_if_file_exists(path, confirm)
        confirm.assert_called_once_with(path)

    def test_warn_if_file_exists_declined(self):
        path = self.test_dir / "a.spec.ts"
        path.touch()
        with self.assertRaises(GeneratorError) as cm:
            file_utils.warn_if_file_exists(path, lambda p: False)
        self.assertEqual(cm.exception.code, ErrorCode.UNIT_TEST_FILE_EXISTS)
        self.assertTrue(cm.exception.is_bypassed)

    @mock.patch("builtins.input", return_value="y")
    def test_confirm_overwrite_yes(self, mock_input):
        self.assertTrue(file_utils.confirm_overwrite(Path("a.spec.ts")))

    @mock.patch("builtins.input", return_value="")
    def test_confirm_overwrite_default_no(self, mock_input):
        self.assertFalse(file_utils.confirm_overwrite(Path("a.spec.ts")))

    @mock.patch("builtins.input", side_effect=EOFError)
    def test_confirm_overwrite_eof(self, mock_input):
        self.assertFalse(file_utils.confirm_overwrite(Path("a.spec.ts")))

    def test_write_content_to_file(self):
        path = self.test_dir / "a.spec.ts"
        file_utils.write_content_to_file("import a from '../a';\n", path)
        self.assertEqual(path.read_text(encoding="utf-8"), "import a from '../a';\n")

    def test_write_content_to_missing_directory(self):
        with self.assertRaises(GeneratorError) as cm:
            file_utils.write_content_to_file("x", self.test_dir / "nope" / "a.ts")
        self.assertEqual(cm.exception.code, ErrorCode.UNKNOWN)

    @mock.patch.dict("os.environ", {"VISUAL": "", "EDITOR": "nano"}, clear=True)
    def test_resolve_editor(self):
        self.assertEqual(file_utils.resolve_editor(), "nano")
        self.assertEqual(file_utils.resolve_editor("code --wait"), "code --wait")

    @mock.patch("unit_test_generator.generator.file_utils.subprocess.run")
    def test_open_file_in_editor(self, mock_run):
        path = self.test_dir / "a.spec.ts"
        file_utils.open_file_in_editor(path, "code --wait")
        mock_run.assert_called_once_with(
            ["code", "--wait", str(path)], check=False
        )

    @mock.patch.dict("os.environ", {}, clear=True)
    @mock.patch("unit_test_generator.generator.file_utils.subprocess.run")
    def test_open_file_without_editor(self, mock_run):
        file_utils.open_file_in_editor(self.test_dir / "a.spec.ts")
        mock_run.assert_not_called()

    @mock.patch(
        "unit_test_generator.generator.file_utils.subprocess.run",
        side_effect=FileNotFoundError("no such editor"),
    )
    def test_open_file_editor_missing(self, mock_run):
        with self.assertRaises(GeneratorError) as cm:
            file_utils.open_file_in_editor(self.test_dir / "a.ts", "missing-ed")
        self.assertEqual(cm.exception.code, ErrorCode.UNKNOWN)


if __name__ == "__main__":
    unittest.main()
