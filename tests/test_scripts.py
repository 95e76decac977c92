"""Tests for the command-line scripts."""

import importlib.util
import json
import os
from pathlib import Path
from types import ModuleType
from unittest.mock import patch

import pytest

from conftest import COMPANY_ID

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def load_script(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def build_report() -> ModuleType:
    return load_script("build_report")


class TestBuildReportWindows:
    """Window flags must be given in pairs."""

    @pytest.mark.parametrize(
        "flags,message",
        [
            (["--start", "2024-06-01"], "--start and --end must be given together"),
            (["--end", "2024-07-01"], "--start and --end must be given together"),
            (["--trend-start", "2024-06-01"], "--trend-start and --trend-end must be given together"),
            (["--trend-end", "2024-07-01"], "--trend-start and --trend-end must be given together"),
        ],
    )
    def test_lone_bound_rejected(
        self,
        build_report: ModuleType,
        capsys: pytest.CaptureFixture,
        flags: list[str],
        message: str,
    ) -> None:
        """Test a window with one bound is a usage error, not all-time."""
        with pytest.raises(SystemExit) as exc_info:
            build_report.main(["financial", "--company", COMPANY_ID, *flags])

        assert exc_info.value.code == 2
        assert message in capsys.readouterr().err

    def test_inverted_window_rejected(self, build_report: ModuleType, capsys: pytest.CaptureFixture) -> None:
        """Test a window ending before it starts is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            build_report.main(
                ["financial", "--company", COMPANY_ID, "--start", "2024-07-01", "--end", "2024-06-01"]
            )

        assert exc_info.value.code == 2
        assert "must be before end" in capsys.readouterr().err

    def test_full_window_builds(self, build_report: ModuleType, capsys: pytest.CaptureFixture) -> None:
        """Test a complete window is applied to the report."""
        env = {"ESTATE_REPORTS_PREVIEW_MODE": "true"}
        with patch.dict(os.environ, env, clear=True), patch.object(build_report, "setup_logging"):
            code = build_report.main(
                ["financial", "--company", COMPANY_ID, "--start", "2024-06-01", "--end", "2024-07-01"]
            )

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["cumulativeWindow"]["label"] == "custom"
        assert data["cumulativeWindow"]["start"] == "2024-06-01T00:00:00"
