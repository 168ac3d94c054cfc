# test_main_cli.py

import pytest

import main


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch, clean_env):
    monkeypatch.setattr(main, "setup_logging", lambda **kwargs: None)


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_ad_to_bs_argument(capsys):
    assert main.main(["1944-01-01"]) == 0
    assert capsys.readouterr().out.strip() == "AD 1944-01-01 → BS 2000-09-18"


def test_bs_to_ad_argument(capsys):
    assert main.main(["--from", "bs", "२०००-०९-१८"]) == 0
    assert capsys.readouterr().out.strip() == "BS 2000-09-18 → AD 1944-01-01"


def test_invalid_argument_exit_code(capsys):
    assert main.main(["2200-01-01"]) == 1
    assert capsys.readouterr().out.startswith("Invalid:")


@pytest.mark.parametrize(
    "source",
    ["bs", "BS", "nepali", "Bikram Sambat", "B.S.", "वि.सं."],
    ids=["bs", "upper", "nepali", "full_name", "dotted", "devanagari"],
)
def test_bs_aliases_convert_to_ad(capsys, source):
    assert main.main(["--from", source, "2000-09-18"]) == 0
    assert capsys.readouterr().out.strip() == "BS 2000-09-18 → AD 1944-01-01"


@pytest.mark.parametrize("source", ["ad", "Gregorian", "English", "ईस्वी"])
def test_ad_aliases_convert_to_bs(source):
    assert main.render(source, "1944-01-01") == "AD 1944-01-01 → BS 2000-09-18"


def test_today_prints_bs_date(capsys, fixed_clock):
    assert main.main(["--today"], clock=fixed_clock) == 0
    assert capsys.readouterr().out.strip() == "18 Poush, 2000 | १८ पौष, २००० शनिबार"


def test_today_outside_table_is_reported(capsys, clock_at):
    assert main.main(["--today"], clock=clock_at(2040, 1, 1)) == 1
    out = capsys.readouterr().out
    assert out.startswith("Invalid:")
    assert "2040-01-01" in out


def test_render_unknown_calendar():
    assert main.render("lunar", "2020-01-01").startswith("Invalid:")


def test_interactive_loop(monkeypatch, capsys):
    _feed(monkeypatch, ["1944-01-13", "", "garbage", "quit", "1944-01-01"])
    assert main.main([]) == 0
    out = capsys.readouterr().out
    assert "AD 1944-01-13 → BS 2000-10-01" in out
    assert "Invalid:" in out
    assert "1944-01-01 →" not in out


def test_interactive_loop_ends_on_eof(monkeypatch, capsys):
    _feed(monkeypatch, ["2000-09-18"])
    assert main.main(["--from", "bs"]) == 0
    out = capsys.readouterr().out
    assert "BS 2000-09-18 → AD 1944-01-01" in out
    assert "Bye!" in out
