import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from ligen.config import get_config_setting, get_default_holder, get_detection_threshold
from ligen.constants import LOAD_MATCH_THRESHOLD, get_user_dir


class TestGetConfigSetting(unittest.TestCase):

    def setUp(self):
        self.dirname = tempfile.mkdtemp()
        self.config_file = Path(self.dirname, "config.ini")
        self.config_file.write_text(
            "[settings]\nholder = Max Moon\nthreshold = 0.75\nempty =\n", encoding="utf-8"
        )

        patcher = patch("ligen.config.CONFIG_FILE_USER", self.config_file)
        patcher.start()
        self.addCleanup(patcher.stop)

        env_patcher = patch.dict(os.environ, {}, clear=False)
        env_patcher.start()
        self.addCleanup(env_patcher.stop)
        for name in ["LIGEN_HOLDER", "LIGEN_THRESHOLD", "LIGEN_EMPTY"]:
            os.environ.pop(name, None)

    def tearDown(self):
        shutil.rmtree(self.dirname)

    def test_value_from_config_file(self):
        self.assertEqual(get_config_setting("holder"), "Max Moon")
        self.assertEqual(get_default_holder(), "Max Moon")

    def test_environment_takes_precedence(self):
        os.environ["LIGEN_HOLDER"] = "Peanut Butter"
        self.assertEqual(get_config_setting("holder"), "Peanut Butter")

    def test_default(self):
        self.assertIsNone(get_config_setting("missing"))
        self.assertEqual(get_config_setting("missing", default="x"), "x")
        self.assertEqual(get_config_setting("empty", default="x"), "x")

    def test_missing_config_file(self):
        self.config_file.unlink()

        self.assertEqual(get_default_holder(), "")
        self.assertEqual(get_detection_threshold(), LOAD_MATCH_THRESHOLD)

    def test_threshold(self):
        self.assertEqual(get_detection_threshold(), 0.75)

        os.environ["LIGEN_THRESHOLD"] = "0.5"
        self.assertEqual(get_detection_threshold(), 0.5)

    def test_invalid_threshold(self):
        for value in ["high", "1.5", "-0.1"]:
            with self.subTest(value=value):
                os.environ["LIGEN_THRESHOLD"] = value
                self.assertEqual(get_detection_threshold(), LOAD_MATCH_THRESHOLD)


class TestUserDir(unittest.TestCase):

    @patch.dict(os.environ, {"LIGEN_CONFIG_DIR": "/tmp/ligen-config"})
    def test_env_override(self):
        self.assertEqual(get_user_dir(), Path("/tmp/ligen-config"))

    def test_default(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("LIGEN_CONFIG_DIR", None)
            self.assertEqual(get_user_dir().name, ".ligen")
