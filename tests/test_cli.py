"""CLI tests for langpack.cli (LangPack.run / main)."""
from __future__ import annotations

import contextlib
import io
import json
import shutil
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path
from typing import List
from unittest.mock import patch

from langpack.cli import CliError, LangPack, main

BUILD_SCRIPT = Path(__file__).resolve().parent / "tools" / "build_fixtures.py"
FIXTURES: Path


def setUpModule() -> None:
    global FIXTURES
    FIXTURES = Path(tempfile.mkdtemp(prefix="langpack-cli-")) / "lang"
    subprocess.check_call([sys.executable, str(BUILD_SCRIPT), str(FIXTURES)], stdout=subprocess.DEVNULL)


def tearDownModule() -> None:
    shutil.rmtree(FIXTURES.parent, ignore_errors=True)


def _run(args: List[str]) -> str:
    """Execute the CLI against the fixture package and return its output."""
    return LangPack.run(["-d", str(FIXTURES), "-n", "messages", *args])


class RenderKeyTests(unittest.TestCase):
    def test_key_with_fields(self) -> None:
        self.assertEqual(_run(["-f", "player=Steve", "greeting"]), "Hello Steve!\n")

    def test_language_flag(self) -> None:
        self.assertEqual(_run(["-l", "de", "-f", "player=Steve", "greeting"]), "Hallo Steve!\n")

    def test_fallback_flag(self) -> None:
        self.assertEqual(_run(["-l", "de", "--fallback", "en", "english_only"]), "Only in English\n")

    def test_text_field_drives_conditionals(self) -> None:
        out = _run(["-f", "player=Steve", "-f", "vip=false", "rank_line"])
        self.assertEqual(out, "[Member] Steve\n")

    def test_append_package(self) -> None:
        self.assertEqual(_run(["--append", "extra", "-f", "player=Ann", "farewell"]), "Bye Ann\n")


class TemplateTests(unittest.TestCase):
    def test_template_uses_package_as_store(self) -> None:
        out = _run(["-f", "player=Steve", "-t", "{{greeting}} ({{if:vip:vip_badge:member_badge}})"])
        self.assertEqual(out, "Hello Steve! ()\n")

    def test_first_duplicate_field_wins_in_both_modes(self) -> None:
        dup = ["-f", "player=First", "-f", "player=Second"]
        self.assertEqual(_run([*dup, "greeting"]), "Hello First!\n")
        self.assertEqual(_run([*dup, "-t", "{{greeting}}"]), "Hello First!\n")

    def test_template_translates_color_codes(self) -> None:
        self.assertEqual(_run(["-t", "&aHi {{red}}x"]), "§aHi §4x\n")

    def test_template_segments(self) -> None:
        out = _run(["-s", "-t", "A [@command: /x: B]"])
        lines = [json.loads(line) for line in out.splitlines()]
        self.assertEqual(lines, [
            {"text": "A "},
            {"text": "B", "action": {"kind": "run_command", "payload": "/x"}},
        ])


class SegmentOutputTests(unittest.TestCase):
    def test_segments_as_json_lines(self) -> None:
        lines = [json.loads(line) for line in _run(["-s", "spawn_link"]).splitlines()]
        self.assertEqual(lines[1], {"text": "to spawn", "action": {"kind": "run_command", "payload": "/spawn"}})
        self.assertEqual(len(lines), 3)

    def test_hover_marker_runs_command(self) -> None:
        out = _run(["-s", "-t", "[@hover: tip: text]"])
        self.assertEqual(json.loads(out), {"text": "text", "action": {"kind": "run_command", "payload": "tip"}})


class FatalTests(unittest.TestCase):
    def test_missing_key_is_fatal(self) -> None:
        with self.assertRaises(CliError):
            _run(["does_not_exist"])

    def test_malformed_field_is_fatal(self) -> None:
        with self.assertRaises(CliError):
            _run(["-f", "novalue", "greeting"])

    def test_unknown_language_is_fatal(self) -> None:
        with self.assertRaises(CliError):
            _run(["-l", "zz", "greeting"])

    def test_malformed_markup_is_fatal(self) -> None:
        with self.assertRaises(CliError):
            _run(["-s", "bad_link"])

    def test_key_or_template_required(self) -> None:
        with self.assertRaises(CliError):
            _run([])


class MainTests(unittest.TestCase):
    def _main(self, args: List[str]) -> tuple[int, str]:
        out = io.StringIO()
        argv = ["langpack", "-d", str(FIXTURES), "-n", "messages", *args]
        with patch.object(sys, "argv", argv), contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as cm:
                main()
        return cm.exception.code, out.getvalue()

    def test_success_exit_code(self) -> None:
        code, out = self._main(["-f", "player=Bo", "greeting"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "Hello Bo!\n")

    def test_failure_exit_code(self) -> None:
        code, out = self._main(["missing"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")


if __name__ == "__main__":
    unittest.main()
