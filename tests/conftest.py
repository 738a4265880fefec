"""Shared pytest fixtures for DNDML tests."""

from pathlib import Path

import pytest

from dndml.core import ir
from dndml.core.dsl_parser_impl import parse_dsl

FIGHTER_SHEET = """\
@section Abilities:
  @field str: %stat[ability: 16; mod: 3];
  @field dex: %stat[ability: 12; mod: NULL];
@end-section

@section Combat:
  @field hp: %int[31];
  @field hit_dice: %dice[3d10+2];
  @field death_saves: %deathsaves[succ: 0; fail: 1];
@end-section

@section Inventory:
  @field name: %string["Brannoc"];
  @field shield: %item[val: "Shield"; qty: 1; weight: 6];
  @field pack: %itemlist[
    %item[val: "Rope"; qty: 1; weight: 5];
    %item[val: "Torch"; qty: 3; weight: 1];
  ];
@end-section
"""


@pytest.fixture
def fighter_text() -> str:
    """Return a sheet using every value kind."""
    return FIGHTER_SHEET


@pytest.fixture
def fighter_sheet(fighter_text: str) -> ir.CharSheet:
    """Return the parsed fighter sheet."""
    return parse_dsl(fighter_text, "fighter.dndml")


@pytest.fixture
def examples_dir() -> Path:
    """Return path to the bundled example projects."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def corpora_dir() -> Path:
    """Return path to the parser corpora."""
    return Path(__file__).parent / "corpora"
