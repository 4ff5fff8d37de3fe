"""Load player profiles from a directory of TOML files.

Each file describes one player::

    [player]
    id = 1
    name = "Lethly"
    region = "euw"
    languages = ["danish"]
    voice = [false]
    positions = ["marksman"]
    age_group = 1
    comment = "Great player, promise"

    [criteria]
    positions = ["top", "support"]
    voice = [false, true]
    age_groups = [1]
    ignore_language = false

    [[leagues]]
    type = "RANKED_SOLO_5x5"
    tier = "DIAMOND"
    rank = 1
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar

from domain.common import CompetitiveStanding, Criteria, Player
from domain.config_base import load_toml_directory, read_str_list
from domain.matching.standings import select_standing
from domain.protocol import SOLO_QUEUE_TYPE, Position, parse_position, parse_region, parse_tier

E = TypeVar("E")


@dataclass(frozen=True)
class MatchingSettings:
    """Which ladder a roster is matched on."""

    queue_type: str = SOLO_QUEUE_TYPE


def load_player_roster(
    config_dir: Path,
    *,
    settings: MatchingSettings | None = None,
) -> list[Player]:
    """Load and validate all player TOML files in a directory."""
    settings = settings or MatchingSettings()
    return load_toml_directory(
        config_dir,
        lambda raw, file_path: _parse_player(raw, file_path, settings=settings),
        identity=lambda player: player.id,
        duplicate_label="player ids",
    )


def _parse_player(raw: dict[str, Any], file_path: Path, *, settings: MatchingSettings) -> Player:
    player_raw = _read_table(raw, "player", file_path=file_path)
    criteria_raw = _read_table(raw, "criteria", file_path=file_path)
    leagues_raw = raw.get("leagues", [])
    if not isinstance(leagues_raw, list) or not all(isinstance(item, dict) for item in leagues_raw):
        raise ValueError(f"{file_path}: [[leagues]] must be an array of tables")

    player_id = _require_int(player_raw, "id", file_path=file_path, section="player")
    name = str(player_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [player].name is required")
    if "region" not in player_raw:
        raise ValueError(f"{file_path}: [player].region is required")

    comment_value = player_raw.get("comment")
    comment = None if comment_value is None else str(comment_value)

    region = _parse_label(
        parse_region, player_raw["region"], file_path=file_path, field="[player].region"
    )
    positions = _read_positions(player_raw, file_path=file_path, section="player")
    criteria = _parse_criteria(criteria_raw, file_path)
    standings = [_parse_league(league_raw, file_path) for league_raw in leagues_raw]

    return Player(
        id=player_id,
        name=name,
        region=region,
        voice=_read_voice(player_raw, file_path=file_path, section="player"),
        languages=frozenset(
            read_str_list(player_raw, "languages", file_path=file_path, section="player")
        ),
        age_group=_require_int(player_raw, "age_group", file_path=file_path, section="player"),
        positions=positions,
        standing=select_standing(standings, queue_type=settings.queue_type),
        criteria=criteria,
        comment=comment,
    )


def _parse_criteria(raw: dict[str, Any], file_path: Path) -> Criteria:
    age_groups = raw.get("age_groups", [])
    if not isinstance(age_groups, list) or not all(_is_int(item) for item in age_groups):
        raise ValueError(f"{file_path}: [criteria].age_groups must be a list of integers")

    ignore_language = raw.get("ignore_language", False)
    if not isinstance(ignore_language, bool):
        raise ValueError(f"{file_path}: [criteria].ignore_language must be a boolean")

    return Criteria(
        positions=_read_positions(raw, file_path=file_path, section="criteria"),
        voice=_read_voice(raw, file_path=file_path, section="criteria"),
        age_groups=frozenset(age_groups),
        ignore_language=ignore_language,
    )


def _parse_league(raw: dict[str, Any], file_path: Path) -> CompetitiveStanding:
    if "tier" not in raw:
        raise ValueError(f"{file_path}: [[leagues]].tier is required")
    rank = raw.get("rank")
    if rank is not None and not _is_int(rank):
        raise ValueError(f"{file_path}: [[leagues]].rank must be an integer")
    tier = _parse_label(parse_tier, raw["tier"], file_path=file_path, field="[[leagues]].tier")
    try:
        return CompetitiveStanding(
            tier=tier,
            division=rank,
            queue_type=str(raw.get("type", SOLO_QUEUE_TYPE)),
        )
    except ValueError as exc:
        raise ValueError(f"{file_path}: [[leagues]].rank: {exc}") from exc


def _read_table(raw: dict[str, Any], key: str, *, file_path: Path) -> dict[str, Any]:
    value = raw.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"{file_path}: [{key}] must be a table")
    return value


def _read_positions(raw: dict[str, Any], *, file_path: Path, section: str) -> frozenset[Position]:
    labels = read_str_list(raw, "positions", file_path=file_path, section=section)
    return frozenset(
        _parse_label(parse_position, label, file_path=file_path, field=f"[{section}].positions")
        for label in labels
    )


def _parse_label(parser: Callable[[object], E], label: object, *, file_path: Path, field: str) -> E:
    try:
        return parser(label)
    except ValueError as exc:
        raise ValueError(f"{file_path}: {field}: {exc}") from exc


def _read_voice(raw: dict[str, Any], *, file_path: Path, section: str) -> frozenset[bool]:
    value = raw.get("voice", [])
    if not isinstance(value, list) or not all(isinstance(item, bool) for item in value):
        raise ValueError(f"{file_path}: [{section}].voice must be a list of booleans")
    return frozenset(value)


def _require_int(raw: dict[str, Any], key: str, *, file_path: Path, section: str) -> int:
    if key not in raw:
        raise ValueError(f"{file_path}: [{section}].{key} is required")
    value = raw[key]
    if not _is_int(value):
        raise ValueError(f"{file_path}: [{section}].{key} must be an integer")
    return value


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = ["MatchingSettings", "load_player_roster"]
