# =============================================================================
# File: forum/seed.py
# Purpose: Load data/boards.yml -> insert missing boards.
# =============================================================================
from __future__ import annotations

import logging
from pathlib import Path

import yaml
from sqlalchemy.orm import sessionmaker

from .models import Board

BOARDS_FILE = Path(__file__).resolve().parent / "data" / "boards.yml"

log = logging.getLogger(__name__)


def load_board_titles(path: Path = BOARDS_FILE) -> list[str]:
    """Return board titles from the YAML file (empty list when missing)."""
    if not path.exists():
        log.warning("%s missing -> no boards to seed", path.name)
        return []

    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} must contain a top-level mapping")

    titles: list[str] = []
    for entry in raw.get("boards") or []:
        title = entry.get("title") if isinstance(entry, dict) else entry
        title = (str(title) if title is not None else "").strip()
        if title:
            titles.append(title)
    return titles


def seed_boards_from_yaml(session_factory: sessionmaker, path: Path = BOARDS_FILE) -> int:
    """Insert boards listed in boards.yml that are not in the table yet."""
    titles = load_board_titles(path)
    inserted = 0
    with session_factory() as s:
        existing = {t for (t,) in s.query(Board.title).all()}
        for title in titles:
            if title in existing:
                continue
            s.add(Board(title=title))
            existing.add(title)
            inserted += 1
        s.commit()

    if inserted:
        log.info("Seeded %d boards from %s", inserted, path.name)
    return inserted
