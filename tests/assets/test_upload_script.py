"""
Upload Script Tests

Runs scripts/upload_asset.py main() against the mock platform.
"""

import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "upload_asset.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("upload_asset_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestUploadScript:
    """Command line entry point"""

    def test_mock_upload_prints_entity(self, script, png_file, capsys):
        exit_code = script.main(["--mock", str(png_file), "--owner", "urn:li:person:1"])

        assert exit_code == 0
        assert capsys.readouterr().out.startswith("urn:li:digitalmediaAsset:")

    def test_mock_status(self, script, capsys):
        exit_code = script.main(["--mock", "--status", "urn:li:digitalmediaAsset:9"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "urn:li:digitalmediaAsset:9: AVAILABLE"

    def test_nothing_to_do(self, script):
        assert script.main(["--mock"]) == 2

    def test_missing_owner(self, script, png_file):
        assert script.main(["--mock", str(png_file), "--owner", ""]) == 2
