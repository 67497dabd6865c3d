"""Tests for the passforge command-line interface."""

from unittest.mock import PropertyMock, patch

import pytest

from passforge import CHARACTER_SETS
from passforge.cli import main


def _passwords(out: str) -> list[str]:
    # Each line reads "  <password>  (<label>, <bits> bits)"
    return [line.split()[0] for line in out.splitlines() if line.strip()]


# ── generate ───────────────────────────────────────────────────────────────


class TestGenerate:
    def test_default(self, capsys):
        assert main(["generate"]) == 0
        [pwd] = _passwords(capsys.readouterr().out)
        assert len(pwd) == 8

    def test_length_and_count(self, capsys):
        assert main(["generate", "-n", "16", "-c", "5"]) == 0
        passwords = _passwords(capsys.readouterr().out)
        assert len(passwords) == 5
        assert all(len(p) == 16 for p in passwords)

    def test_strength_shown(self, capsys):
        main(["generate", "-n", "20"])
        assert "bits)" in capsys.readouterr().out

    def test_lowercase_only(self, capsys):
        assert main([
            "generate", "-n", "20",
            "--no-uppercase", "--no-numeric", "--no-special",
        ]) == 0
        [pwd] = _passwords(capsys.readouterr().out)
        assert pwd.isalpha() and pwd.islower()

    def test_minimums(self, capsys):
        assert main(["generate", "-n", "10", "--min-numeric", "4", "--min-special", "3"]) == 0
        [pwd] = _passwords(capsys.readouterr().out)
        assert sum(c in CHARACTER_SETS["numeric"] for c in pwd) >= 4
        assert sum(c in CHARACTER_SETS["special"] for c in pwd) >= 3

    def test_custom(self, capsys):
        assert main(["generate", "--custom", "ab", "-n", "10"]) == 0
        [pwd] = _passwords(capsys.readouterr().out)
        assert len(pwd) == 10
        assert set(pwd) <= {"a", "b"}

    def test_length_too_short(self, capsys):
        assert main(["generate", "-n", "1"]) == 1
        assert "at least 2" in capsys.readouterr().err

    def test_no_character_set(self, capsys):
        assert main([
            "generate", "--no-lowercase", "--no-uppercase", "--no-numeric", "--no-special",
        ]) == 1
        assert "Please select at least one character set" in capsys.readouterr().err

    def test_whitespace_custom(self, capsys):
        assert main(["generate", "--custom", "   "]) == 1
        assert "Custom characters cannot be empty" in capsys.readouterr().err

    @pytest.mark.parametrize("argv", [
        ["generate", "-n", "0"],
        ["generate", "-n", "101"],
        ["generate", "--min-numeric", "-1"],
        ["generate", "-c", "0"],
    ])
    def test_usage_errors(self, argv):
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 2

    @patch("passforge.session.pyperclip.copy")
    def test_copy(self, mock_copy, capsys):
        assert main(["generate", "-n", "12", "-c", "3", "--copy"]) == 0
        out = capsys.readouterr().out
        assert "Copied to clipboard." in out
        # The last password printed is the one copied
        mock_copy.assert_called_once_with(_passwords(out)[2])

    @patch("passforge.session.pyperclip.copy")
    def test_copy_message_follows_copied_indicator(self, mock_copy, capsys):
        with patch(
            "passforge.cli.GeneratorSession.copied",
            new_callable=PropertyMock, return_value=False,
        ):
            assert main(["generate", "--copy"]) == 0
        captured = capsys.readouterr()
        mock_copy.assert_called_once()
        assert "Copied to clipboard." not in captured.out
        assert "Could not copy to clipboard." in captured.err

    @patch("passforge.session.pyperclip.copy", side_effect=RuntimeError("no clipboard"))
    def test_copy_failure_does_not_fail(self, mock_copy, capsys):
        assert main(["generate", "--copy"]) == 0
        captured = capsys.readouterr()
        assert "Could not copy to clipboard." in captured.err
        assert len(_passwords(captured.out)) == 1


# ── charsets / help ────────────────────────────────────────────────────────


class TestMisc:
    def test_charsets(self, capsys):
        assert main(["charsets"]) == 0
        out = capsys.readouterr().out
        for name, chars in CHARACTER_SETS.items():
            assert name in out
            assert chars in out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: passforge" in capsys.readouterr().out
