import json, tempfile, shutil
import unittest
from pathlib import Path
from unittest import mock
from habits import main as main_module


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())
        patcher = mock.patch.object(main_module, "setup_logger")
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def test_export_pdf_for_given_week(self):
        out = self.tmp / "week.pdf"
        code = main_module.main(["--data-dir", str(self.tmp), "--week", "2024-W10", "--export-pdf", str(out)])
        self.assertEqual(code, 0)
        self.assertTrue(out.read_bytes().startswith(b"%PDF"))
        # opening the week seeds its record
        self.assertTrue((self.tmp / "habits_2024_10.json").exists())

    def test_corrupt_week_exits_with_error(self):
        (self.tmp / "habits_2024_10.json").write_text("{not json", encoding="utf-8")
        with mock.patch("sys.stderr") as stderr:
            code = main_module.main(["--data-dir", str(self.tmp), "--week", "2024-W10", "--export-pdf", str(self.tmp / "x.pdf")])
        self.assertEqual(code, 1)
        written = "".join(call.args[0] for call in stderr.write.call_args_list)
        self.assertIn("Error:", written)
        self.assertEqual((self.tmp / "habits_2024_10.json").read_text(encoding="utf-8"), "{not json")
        self.assertFalse((self.tmp / "x.pdf").exists())

    def test_malformed_record_exits_with_error(self):
        (self.tmp / "habits_2024_10.json").write_text(json.dumps([{"name": "a", "color": "magenta"}]), encoding="utf-8")
        with mock.patch("sys.stderr"):
            self.assertEqual(main_module.main(["--data-dir", str(self.tmp), "--week", "2024-W10"]), 1)

    def test_bad_week_argument(self):
        with mock.patch("sys.stderr"), self.assertRaises(SystemExit):
            main_module.build_parser().parse_args(["--week", "2024-10"])

    def test_session_runs_app(self):
        with mock.patch.object(main_module, "HabitTrackerApp") as app_cls:
            code = main_module.main(["--data-dir", str(self.tmp), "--week", "2024-W10"])
        self.assertEqual(code, 0)
        app_cls.return_value.run.assert_called_once_with()
        dispatcher, status_log = app_cls.call_args.args
        self.assertEqual(str(dispatcher.session.key), "2024-W10")


if __name__ == '__main__':
    unittest.main()
