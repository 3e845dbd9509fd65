import logging
from pathlib import Path

import pytest
from helpers import FakeSession, make_pal, serve_digits

from palcheck import cli, scanner
from palcheck.validators import PiDigitsClient


@pytest.fixture(autouse=True)
def _reset_palcheck_logger():
    yield
    logger = logging.getLogger("palcheck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def fake_service(monkeypatch: pytest.MonkeyPatch):
    sessions: list[FakeSession] = []

    def install(windows: dict[int, str]) -> list[FakeSession]:
        def client_factory(api_url: str, *, timeout: float) -> PiDigitsClient:
            session = FakeSession(serve_digits(windows))
            sessions.append(session)
            return PiDigitsClient(api_url, timeout=timeout, session=session)

        monkeypatch.setattr(scanner, "PiDigitsClient", client_factory)
        return sessions

    return install


def test_validate_prints_sorted_entries(
    tmp_path: Path, fake_service, capsys: pytest.CaptureFixture[str]
) -> None:
    small, big = make_pal(19, "1"), make_pal(23, "7")
    (tmp_path / "batch-0.txt").write_text(
        f"0, 30, {small}, 19 \n0, 80, {big}, 23 \n", encoding="utf-8"
    )
    sessions = fake_service({30 - 9 + 1: small})

    code = cli.main(["validate", str(tmp_path), "--preset", "batch", "--api-url", "http://x/pi"])

    assert code == 0
    out_lines = capsys.readouterr().out.splitlines()
    assert len(out_lines) == 2
    assert out_lines[0].startswith("{'size': 23")
    assert out_lines[0].endswith("'position_validated': False}")
    assert out_lines[1].endswith("'position_validated': True}")
    assert sessions[0].calls[0][0] == "http://x/pi"


def test_validate_writes_json_report(tmp_path: Path, fake_service) -> None:
    results = tmp_path / "full_results"
    results.mkdir()
    pal = make_pal(25, "9")
    (results / "x.txt").write_text(f"10, 5, {pal}, 25 \n", encoding="utf-8")
    fake_service({4: pal})
    report = tmp_path / "out" / "report.json"

    code = cli.main(["validate", str(results), "--preset", "full", "--json", str(report)])

    assert code == 0
    assert '"position": 4' in report.read_text(encoding="utf-8")


def test_explicit_threshold_and_digits(
    tmp_path: Path, fake_service, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "r.txt").write_text(f"0, 50, {make_pal(11, '5')}, 11 \n", encoding="utf-8")
    fake_service({})

    code = cli.main(
        ["validate", str(tmp_path), "--threshold", "11", "--exclude-digits", "0,2,4,6,8"]
    )

    assert code == 0
    assert "'size': 11" in capsys.readouterr().out


def test_validate_requires_a_configuration(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["validate", str(tmp_path), "--threshold", "19"])
    assert excinfo.value.code == 2


def test_bad_excluded_digits_is_a_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        cli.main(["validate", str(tmp_path), "--preset", "full", "--exclude-digits", "x"])


def test_missing_directory_exit_code(tmp_path: Path, fake_service) -> None:
    fake_service({})
    assert cli.main(["validate", str(tmp_path / "nope"), "--preset", "full"]) == 2


def test_find_writes_batch_file(tmp_path: Path) -> None:
    core = "123456789" + "0" + "987654321"
    digits_file = tmp_path / "block.txt"
    digits_file.write_text("75" + core + "\n46\n", encoding="utf-8")
    out_dir = tmp_path / "full_results"

    code = cli.main(["find", str(digits_file), "--start", "500", "--out-dir", str(out_dir)])

    assert code == 0
    assert (out_dir / "batch-500.txt").read_text(encoding="utf-8") == f"500, 11, {core}, 19 \n"


def test_empty_pattern_is_a_usage_error(tmp_path: Path, fake_service) -> None:
    fake_service({})
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["validate", str(tmp_path), "--preset", "full", "--pattern", ""])
    assert excinfo.value.code == 2


def test_absolute_pattern_is_a_usage_error(tmp_path: Path, fake_service) -> None:
    fake_service({})
    pattern = str(tmp_path.resolve() / "*.txt")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["validate", str(tmp_path), "--preset", "full", "--pattern", pattern])
    assert excinfo.value.code == 2
