#!/usr/bin/env python3
"""Check duo-queue compatibility between roster players or raw standings."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.common import CompetitiveStanding, Player
from domain.matching import (
    MatchingSettings,
    can_queue,
    languages_compatible,
    load_player_roster,
    match,
    queue_compatible,
    satisfies,
)
from domain.protocol import SOLO_QUEUE_TYPE, parse_tier

DEFAULT_ROSTER_DIR = ROOT_DIR / "configs" / "players"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Duo-queue matching checks.",
)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_roster(roster_dir: Path, queue_type: str) -> dict[int, Player]:
    try:
        players = load_player_roster(roster_dir, settings=MatchingSettings(queue_type=queue_type))
    except (FileNotFoundError, NotADirectoryError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--roster-dir") from exc
    return {player.id: player for player in players}


def _lookup(roster: dict[int, Player], player_id: int, param_hint: str) -> Player:
    try:
        return roster[player_id]
    except KeyError as exc:
        available = ", ".join(str(key) for key in sorted(roster))
        raise typer.BadParameter(
            f"No player with id={player_id}. Available ids: {available}",
            param_hint=param_hint,
        ) from exc


def parse_standing(value: str) -> CompetitiveStanding:
    """Parse ``TIER`` or ``TIER:DIVISION`` (e.g. ``diamond:1``)."""
    tier_label, _, division_label = value.partition(":")
    division: int | None = None
    if division_label:
        try:
            division = int(division_label)
        except ValueError as exc:
            raise typer.BadParameter(f"Division must be an integer in '{value}'") from exc
    try:
        return CompetitiveStanding(tier=parse_tier(tier_label), division=division)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


RosterDirOption = Annotated[
    Path,
    typer.Option("--roster-dir", help="Directory of player TOML files."),
]
QueueTypeOption = Annotated[
    str,
    typer.Option("--queue-type", help="Ladder whose standings are compared."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log why pairs are rejected."),
]


@app.command("pair")
def pair(
    player_id: Annotated[int, typer.Option("--player-id")],
    candidate_id: Annotated[int, typer.Option("--candidate-id")],
    roster_dir: RosterDirOption = DEFAULT_ROSTER_DIR,
    queue_type: QueueTypeOption = SOLO_QUEUE_TYPE,
    verbose: VerboseOption = False,
) -> None:
    """Evaluate one player against one candidate."""
    _configure_logging(verbose)
    roster = _load_roster(roster_dir, queue_type)
    player = _lookup(roster, player_id, "--player-id")
    candidate = _lookup(roster, candidate_id, "--candidate-id")

    typer.echo(f"player={player.id} ({player.name}) standing={player.standing}")
    typer.echo(f"candidate={candidate.id} ({candidate.name}) standing={candidate.standing}")
    typer.echo(f"languages={_yes_no(languages_compatible(player, candidate))}")
    typer.echo(f"can_queue={_yes_no(can_queue(player, candidate))}")
    typer.echo(f"player_accepts_candidate={_yes_no(satisfies(player.criteria, candidate))}")
    typer.echo(f"candidate_accepts_player={_yes_no(satisfies(candidate.criteria, player))}")
    typer.echo(f"match={_yes_no(match(player, candidate))}")


@app.command("candidates")
def candidates(
    player_id: Annotated[int, typer.Option("--player-id")],
    roster_dir: RosterDirOption = DEFAULT_ROSTER_DIR,
    queue_type: QueueTypeOption = SOLO_QUEUE_TYPE,
    verbose: VerboseOption = False,
) -> None:
    """List every roster player that matches the given player."""
    _configure_logging(verbose)
    roster = _load_roster(roster_dir, queue_type)
    player = _lookup(roster, player_id, "--player-id")

    matches = [candidate for candidate in roster.values() if match(player, candidate)]
    if not matches:
        typer.echo(f"No matches for player={player.id} ({player.name}).")
        return

    typer.echo(f"player={player.id} ({player.name}) matches={len(matches)}")
    for index, candidate in enumerate(sorted(matches, key=lambda item: item.id), start=1):
        typer.echo(
            f"{index:2d}. id={candidate.id:<4d} {candidate.name:<20} "
            f"standing={candidate.standing}"
        )


@app.command("standings")
def standings(
    first: Annotated[str, typer.Option("--first", help="TIER or TIER:DIVISION.")],
    second: Annotated[str, typer.Option("--second", help="TIER or TIER:DIVISION.")],
) -> None:
    """Check whether two standings may queue together."""
    first_standing = parse_standing(first)
    second_standing = parse_standing(second)
    typer.echo(
        f"{first_standing} + {second_standing}: "
        f"queue_compatible={_yes_no(queue_compatible(first_standing, second_standing))}"
    )


if __name__ == "__main__":
    app()
