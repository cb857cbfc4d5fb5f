"""Startup behaviour of the run_dev entry point."""

import unittest
from unittest import mock

import run_dev
from bulletin_board.configs.settings import Settings
from bulletin_board.errors import TemplateNotFoundError


class RunDevTests(unittest.TestCase):
    def setUp(self):
        for target, kwargs in (
            ("run_dev.load_dotenv", {}),
            ("run_dev.get_settings", {"return_value": Settings()}),
            ("run_dev.logging.basicConfig", {}),
        ):
            patcher = mock.patch(target, **kwargs)
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_missing_template_exits_with_status_one(self):
        with mock.patch("run_dev.create_app", side_effect=TemplateNotFoundError("index.html")):
            with self.assertRaises(SystemExit) as ctx:
                run_dev.main()

        self.assertEqual(ctx.exception.code, 1)

    def test_runs_app_on_configured_port(self):
        app = mock.Mock()
        with mock.patch("run_dev.create_app", return_value=app):
            run_dev.main()

        app.run.assert_called_once_with(host="127.0.0.1", port=3000, debug=False)


if __name__ == "__main__":
    unittest.main()
