import pytest

import cli


def test_cli_prints_probability_and_rarity(capsys):
    assert cli.main(["2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("p_within: 0.95449973610364")
    assert len(out[0].split(".")[1]) == 20
    assert out[1] == "rarity: 1 in 44"


def test_cli_zero_sigma(capsys):
    assert cli.main(["0", "--digits", "4"]) == 0
    assert capsys.readouterr().out.splitlines() == ["p_within: 0.0000", "rarity: 1 in 2"]


def test_cli_rejects_negative(capsys):
    assert cli.main(["--", "-1"]) == 2
    assert "non-negative" in capsys.readouterr().err


def test_cli_rejects_non_number():
    with pytest.raises(SystemExit):
        cli.main(["abc"])
