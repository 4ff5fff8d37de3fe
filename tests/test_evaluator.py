"""Unit tests for the top-level duo matching decision."""

from __future__ import annotations

import logging
from itertools import product

import pytest

from domain.common import Player
from domain.matching.evaluator import can_queue, languages_compatible, match
from domain.protocol import Position, Region, Tier

from factories import make_player, open_criteria, standing


def _lethly_and_hansp() -> tuple[Player, Player]:
    diamond1 = standing(Tier.DIAMOND, 1)
    player = make_player(
        1,
        name="Lethly",
        languages=frozenset({"danish"}),
        positions=frozenset({Position.MARKSMAN}),
        standing=diamond1,
        criteria=open_criteria(
            positions=frozenset({Position.TOP, Position.SUPPORT}),
            voice=frozenset({False, True}),
            age_groups=frozenset({1}),
        ),
    )
    candidate = make_player(
        2,
        name="hansp",
        languages=frozenset({"danish", "english"}),
        positions=frozenset({Position.TOP}),
        standing=diamond1,
        criteria=open_criteria(
            positions=frozenset({Position.MARKSMAN, Position.TOP}),
            voice=frozenset({False}),
            age_groups=frozenset({1}),
        ),
    )
    return player, candidate


def test_mutually_compatible_players_match() -> None:
    player, candidate = _lethly_and_hansp()
    assert match(player, candidate)
    assert match(candidate, player)


def test_player_never_matches_itself() -> None:
    player, _ = _lethly_and_hansp()
    assert not match(player, player)


def test_same_id_is_rejected_even_for_distinct_objects() -> None:
    assert not match(make_player(7), make_player(7, name="other"))


def test_disjoint_languages_are_rejected() -> None:
    player = make_player(1, languages=frozenset({"danish"}))
    candidate = make_player(2, languages=frozenset({"german"}))
    assert not languages_compatible(player, candidate)
    assert not match(player, candidate)


def test_language_override_requires_both_players() -> None:
    ignoring = open_criteria(ignore_language=True)
    player = make_player(1, languages=frozenset({"danish"}), criteria=ignoring)
    candidate = make_player(2, languages=frozenset({"german"}))
    assert not match(player, candidate)

    candidate = make_player(2, languages=frozenset({"german"}), criteria=ignoring)
    assert languages_compatible(player, candidate)
    assert match(player, candidate)


def test_different_regions_are_rejected() -> None:
    player = make_player(1, region=Region.EUW)
    candidate = make_player(2, region=Region.NA)
    assert not can_queue(player, candidate)
    assert not match(player, candidate)


def test_incompatible_standings_are_rejected() -> None:
    player = make_player(1, standing=standing(Tier.DIAMOND, 1))
    candidate = make_player(2, standing=standing(Tier.PLATINUM, 1))
    assert not can_queue(player, candidate)
    assert not match(player, candidate)


def test_criteria_must_hold_in_both_directions() -> None:
    picky = open_criteria(positions=frozenset({Position.SUPPORT}))
    player = make_player(1, positions=frozenset({Position.MID}), criteria=picky)
    candidate = make_player(2, positions=frozenset({Position.MID}))

    # candidate accepts player, but player rejects candidate's only position
    assert not match(player, candidate)
    assert not match(candidate, player)


def test_rejection_reason_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    player = make_player(1, region=Region.EUW)
    candidate = make_player(2, region=Region.KR)
    with caplog.at_level(logging.DEBUG, logger="domain.matching.evaluator"):
        assert not match(player, candidate)
    assert "cannot queue" in caplog.text


def test_match_is_symmetric_across_varied_players() -> None:
    players = [
        make_player(
            index,
            region=region,
            languages=frozenset({language}),
            standing=player_standing,
            positions=frozenset({position}),
            criteria=open_criteria(
                positions=frozenset({Position.MID, Position.TOP}),
                ignore_language=ignore_language,
            ),
        )
        for index, (region, language, player_standing, position, ignore_language) in enumerate(
            product(
                (Region.EUW, Region.NA),
                ("english", "danish"),
                (
                    standing(Tier.GOLD, 2),
                    standing(Tier.PLATINUM),
                    standing(Tier.DIAMOND, 1),
                    standing(Tier.DIAMOND, 4),
                    standing(Tier.MASTER),
                ),
                (Position.MID, Position.SUPPORT),
                (False, True),
            )
        )
    ]
    for player, candidate in product(players, repeat=2):
        assert match(player, candidate) is match(candidate, player)
        if player.id == candidate.id:
            assert not match(player, candidate)
