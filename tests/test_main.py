import pytest

from main import main, parse_operand
from arith import MAX_UINT_64


# ========================================================================= #
# TESTS                                                                     #
# ========================================================================= #


def test_parse_operand():
    assert parse_operand("48") == 48
    assert parse_operand("0x30") == 48
    assert parse_operand("0b110000") == 48
    assert parse_operand(str(MAX_UINT_64)) == MAX_UINT_64


@pytest.mark.parametrize("no_jit", [False, True])
def test_gcd(capsys, no_jit):
    argv = ["gcd", "48", "18"] + (["--no-jit"] if no_jit else [])
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == "6"


@pytest.mark.parametrize("algorithm", ["euclid", "euclidean", "binary", "textbook_binary", "default"])
def test_gcd_algorithm(capsys, algorithm):
    assert main(["gcd", "18", "48", "--algorithm", algorithm]) == 0
    assert capsys.readouterr().out.strip() == "6"


def test_gcd_hex_operands(capsys):
    assert main(["gcd", "0x30", "0x12"]) == 0
    assert capsys.readouterr().out.strip() == "6"


@pytest.mark.parametrize("no_jit", [False, True])
def test_lcm(capsys, no_jit):
    argv = ["lcm", "21", "6"] + (["--no-jit"] if no_jit else [])
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == "42"


def test_lcm_overflow(capsys):
    assert main(["lcm", str(MAX_UINT_64), str(MAX_UINT_64 - 1)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


@pytest.mark.parametrize("operand", ["-1", str(MAX_UINT_64 + 1), "twelve", "1.5"])
def test_invalid_operand(capsys, operand):
    with pytest.raises(SystemExit) as e:
        main(["gcd", operand, "3"])
    assert e.value.code == 2


def test_bench(capsys):
    assert main(["bench", "-n", "50", "--bits", "12", "-a", "euclid", "-a", "binary"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].strip().startswith("euclid:")
    assert lines[1].strip().startswith("binary:")


def test_missing_command():
    with pytest.raises(SystemExit):
        main([])
