import io

import pytest

from enigmalab.cli import main

KAT_CONFIG = "B;III-A-A,II-A-A,I-A-A;A-B"


def test_input_argument(capsys):
    assert main(["-c", KAT_CONFIG, "-i", "A" * 26]) == 0
    assert capsys.readouterr().out == "WUPGNWOJUSQGTULMNUNYRHZSHP\n"


def test_punctuation_preserved(capsys):
    assert main(["-c", KAT_CONFIG, "-i", "a a, a!"]) == 0
    assert capsys.readouterr().out == "W U, P!\n"


def test_stdin_lines_share_rotor_state(capsys):
    stdin = io.StringIO("AAAAA\r\nAAAAA\n")
    assert main(["-c", KAT_CONFIG], stdin=stdin) == 0
    assert capsys.readouterr().out.splitlines() == ["WUPGN", "WOJUS"]


def test_decrypt_is_encrypt(capsys):
    cfg = "A;III-X-B,I-D-Q,II-Z-F;P-O,M-L"
    main(["-c", cfg, "-i", "HELLO, HOW ARE YOU"])
    cipher = capsys.readouterr().out.rstrip("\n")
    main(["-c", cfg, "-i", cipher])
    assert capsys.readouterr().out == "HELLO, HOW ARE YOU\n"


def test_preset(capsys):
    assert main(["--preset", "enigma-i", "-i", "AAAAA"]) == 0
    assert capsys.readouterr().out == "BDZGO\n"


def test_show_config(capsys):
    assert main(["-c", " b ; i-a-a , ii-b-c ; a-b", "--show-config"]) == 0
    assert capsys.readouterr().out == "B;I-A-A,II-B-C;A-B\n"


@pytest.mark.parametrize(
    "config",
    [
        "B;I-A-A;A-B;C-D",   # too many sections
        "B;I-A",             # rotor missing ring
        "B;IX-A-A",          # unknown rotor
        "Q;I-A-A",           # unknown reflector
        "B;I-A-A;A-B,B-C",   # letter wired twice
        "B;I-²-A",           # non-ASCII digit offset
    ],
)
def test_bad_config_exits_with_2(config, capsys):
    assert main(["-c", config, "-i", "HELLO"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid enigma config provided" in captured.err


def test_config_and_preset_are_exclusive():
    with pytest.raises(SystemExit):
        main(["-c", KAT_CONFIG, "--preset", "enigma-i", "-i", "A"])
