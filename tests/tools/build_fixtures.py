#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Create / refresh the language-package fixture tree used by
the langpack test-suite.

Idempotent. Usage: build_fixtures.py [TARGET_DIR]
"""
from __future__ import annotations

import shutil
import sys
import textwrap
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


# ───────────────────── language files ─────────────────────
def _populate_messages(root: Path) -> None:
    _write(root / "messages_en.yml", """
        greeting: "Hello {{player}}!"
        prefix: "&6[Server]&r"
        welcome: "{{prefix}} {{greeting}}"
        rank_line: "{{if:vip:vip_badge:member_badge}} {{player}}"
        vip_badge: "&e[VIP]"
        member_badge: "[Member]"
        motd:
          - "Line one"
          - "Line two"
        tip:
          type: SEQUENTIAL
          pool:
            - "Tip A"
            - "Tip B"
            - "Tip C"
        tip_reversed:
          type: sequential_reversed
          pool:
            - "One"
            - "Two"
            - "Three"
        broken_policy:
          type: SIDEWAYS
          pool:
            - "x"
            - "y"
        empty_pool:
          type: RANDOM
          pool: []
        spawn_link: "Go [@command: /spawn: to spawn] now"
        bad_link: "[@teleport: /tp: here]"
        loop: "again {{loop}}"
        english_only: "Only in English"
        enabled: true
        color_test: "{{red}}Alert"
    """)

    _write(root / "messages_de.yml", """
        greeting: "Hallo {{player}}!"
        welcome: "{{prefix}} {{greeting}}"
        german_only: "Nur auf Deutsch"
    """)

    # Unknown abbreviation: must be skipped by the loader.
    _write(root / "messages_xx.yml", """
        greeting: "???"
    """)

    _write(root / "extra_en.yml", """
        farewell: "Bye {{player}}"
        greeting: "Hey {{player}}!"
    """)

    _write(root / "notes.txt", "not a language file\n")


def build(root: Path = ROOT) -> Path:
    if root.exists():
        shutil.rmtree(root)
    root.mkdir(parents=True)
    _populate_messages(root)
    return root


if __name__ == "__main__":
    build(Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else ROOT)
