import logging
import os
import unittest
from pathlib import Path
from unittest.mock import patch

import config


class OverpassConfigTests(unittest.TestCase):
    def test_overpass_api_url_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert config.get_overpass_api_url() == config.DEFAULT_OVERPASS_API_URL

    def test_overpass_api_url_blank_uses_default(self) -> None:
        with patch.dict(os.environ, {"OVERPASS_API_URL": "   "}, clear=True):
            assert config.get_overpass_api_url() == config.DEFAULT_OVERPASS_API_URL

    def test_overpass_api_url_strips_trailing_question_mark(self) -> None:
        with patch.dict(
            os.environ,
            {"OVERPASS_API_URL": "https://overpass-api.de/api/interpreter?"},
            clear=True,
        ):
            assert config.get_overpass_api_url() == "https://overpass-api.de/api/interpreter"

    def test_overpass_user_agent(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert config.get_overpass_user_agent() == "StreetLists/1.0"
        with patch.dict(os.environ, {"OVERPASS_USER_AGENT": "Mine/2.0"}, clear=True):
            assert config.get_overpass_user_agent() == "Mine/2.0"


class ExportConfigTests(unittest.TestCase):
    def test_export_dir(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert config.get_export_dir() == Path("exports")
        with patch.dict(os.environ, {"STREET_EXPORT_DIR": "/tmp/lists"}, clear=True):
            assert config.get_export_dir() == Path("/tmp/lists")


class LoggingConfigTests(unittest.TestCase):
    def test_log_level_parsed_case_insensitively(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert config.get_log_level() == logging.DEBUG

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}, clear=True):
            assert config.get_log_level() == logging.INFO
