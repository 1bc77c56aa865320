"""
CLI 검증 - main(argv)를 직접 호출해 stdout/stderr/종료 코드 확인
"""

import pytest

from basen.cli import main


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("BASEN_BASE", "BASEN_LENGTH", "BASEN_MAX", "BASEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


def test_encode(capsys):
    assert _run(capsys, "encode", "11") == (0, "b\n", "")


def test_decode(capsys):
    assert _run(capsys, "decode", "a") == (0, "10\n", "")


def test_encode_with_custom_characters(capsys):
    code, out, _ = _run(capsys, "encode", "11", "--characters=a", "--characters=b")
    assert code == 0
    assert out == "babb\n"


def test_decode_with_custom_characters(capsys):
    code, out, _ = _run(capsys, "decode", "babb", "--characters=a", "--characters=b")
    assert code == 0
    assert out == "11\n"


def test_encode_with_length(capsys):
    assert _run(capsys, "encode", "5", "--length=3") == (0, "005\n", "")


def test_encode_with_base_and_max(capsys):
    assert _run(capsys, "encode", "9", "--base=2", "--max=15") == (0, "1001\n", "")


def test_encode_out_of_range(capsys):
    code, out, err = _run(capsys, "encode", "4096", "--length=2")
    assert code == 1
    assert out == ""
    assert err.startswith("error: ")
    assert "exceeds representable range" in err


def test_encode_negative(capsys):
    code, _, err = _run(capsys, "encode", "-1")
    assert code == 1
    assert "non-negative" in err


def test_encode_non_integer(capsys):
    code, _, err = _run(capsys, "encode", "hello")
    assert code == 1
    assert "value must be an integer" in err


def test_decode_unknown_symbol(capsys):
    code, _, err = _run(capsys, "decode", "$")
    assert code == 1
    assert "unknown symbol '$' at position 0" in err


def test_conflicting_options(capsys):
    code, _, err = _run(capsys, "encode", "1", "--length=2", "--max=10")
    assert code == 1
    assert "cannot be used together" in err


def test_encode_leading_dash_output(capsys):
    """기본 문자집합 63번 심볼은 '-'"""
    assert _run(capsys, "encode", "4042") == (0, "-a\n", "")
    assert _run(capsys, "encode", "262090") == (0, "--a\n", "")


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["decode", "-a"], "4042\n"),
        (["decode", "-"], "63\n"),
        (["decode", "--a"], "262090\n"),
        (["decode", "-a", "--base=64"], "4042\n"),
        (["decode", "--base", "64", "-a"], "4042\n"),
        (["decode", "--", "-a"], "4042\n"),
    ],
)
def test_decode_leading_dash_input(capsys, argv, expected):
    """'-'로 시작하는 문자열도 옵션이 아닌 입력으로 처리"""
    assert _run(capsys, *argv) == (0, expected, "")


def test_encode_decode_roundtrip_via_cli(capsys):
    for num in (0, 63, 4042, 262090, 4095, 123456789):
        code, encoded, _ = _run(capsys, "encode", str(num))
        assert code == 0
        code, decoded, _ = _run(capsys, "decode", encoded.rstrip("\n"))
        assert code == 0
        assert decoded == f"{num}\n", f"Failed for num={num}"


def test_size_env_vars_are_ignored(capsys, monkeypatch):
    """BASEN_LOG_LEVEL 외의 환경 변수는 옵션에 영향을 주지 않음"""
    monkeypatch.setenv("BASEN_BASE", "16")
    monkeypatch.setenv("BASEN_LENGTH", "6")
    assert _run(capsys, "encode", "3", "--characters=a", "--characters=b") == (0, "bb\n", "")


def test_missing_command():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
