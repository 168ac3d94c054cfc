from datetime import date

import pytest

from sambat.utils.date_utils import AD_REFERENCE


def pytest_addoption(parser):
    parser.addoption(
        "--roundtrip-step",
        action="store",
        type=int,
        default=7,
        help="Day step used when sweeping the AD window in round-trip tests (default: 7)",
    )


@pytest.fixture(scope="session")
def roundtrip_step(request):
    step = request.config.getoption("--roundtrip-step")
    return max(1, step)


@pytest.fixture
def fixed_clock():
    """Clock pinned to the AD reference date."""
    return lambda: AD_REFERENCE


@pytest.fixture
def clock_at():
    """Factory for clocks pinned to an arbitrary date."""
    def _make(y: int, m: int, d: int):
        return lambda: date(y, m, d)
    return _make


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Environment without any SAMBAT_* variables and no .env file.

    Each key is set before being deleted so monkeypatch also undoes values
    that load_dotenv writes during the test.
    """
    for key in (
        "SAMBAT_LOG_LEVEL",
        "SAMBAT_LOG_FILE",
        "SAMBAT_PICKER_FIRST_YEAR",
        "SAMBAT_PICKER_LAST_YEAR",
        "SAMBAT_ENV_FILE",
    ):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setenv("SAMBAT_ENV_FILE", str(tmp_path / "missing.env"))
    return monkeypatch
