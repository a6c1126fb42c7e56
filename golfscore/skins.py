"""Skins game ledger.

Each hole is worth one skin to a single outright low score. When the low
score is tied the skin carries over (if the game allows it) and the next
outright winner collects everything pending.
"""

import logging
from typing import Iterable, Mapping, Optional

from .handicap import net_score
from .models import SkinsHoleResult, SkinsLeaderboardEntry, SkinsState
from .schemas import SkinsConfig

logger = logging.getLogger('golfscore.skins')


def new_skins_state() -> SkinsState:
    """No holes recorded, nothing carried over."""
    return SkinsState(carryover_count=0, per_hole_log=())


def comparison_scores(
    scores_by_player: Mapping[str, Optional[int]],
    config: SkinsConfig,
    stroke_index: Optional[int] = None,
) -> dict[str, int]:
    """
    Scores used to decide a hole, keyed by player.

    Players without a score are left out. Net scores are used when the game
    plays off handicaps and the hole's stroke index is known.
    """
    scores = {}
    for player, gross in scores_by_player.items():
        if gross is None:
            continue
        if config.use_handicaps and stroke_index is not None:
            scores[player] = net_score(
                gross, config.handicaps.get(player), stroke_index, config.holes_played
            )
        else:
            scores[player] = gross
    return scores


def record_skins_hole(
    state: SkinsState,
    hole_number: int,
    scores_by_player: Mapping[str, Optional[int]],
    config: SkinsConfig,
    stroke_index: Optional[int] = None,
) -> SkinsState:
    """
    Record one hole of a skins game.

    Args:
        state: Current skins state
        hole_number: Hole being recorded; must follow the last recorded hole
        scores_by_player: Gross score per player (None when not entered)
        config: Game settings (carryover, handicaps)
        stroke_index: Hole stroke index, needed for net scoring

    Returns:
        New SkinsState with the hole appended to the log

    Raises:
        ValueError: If hole_number is not after the last recorded hole
    """
    if state.last_hole is not None and hole_number <= state.last_hole:
        raise ValueError(
            f'Skins holes must be recorded in order: hole {hole_number} '
            f'after hole {state.last_hole}'
        )

    scores = comparison_scores(scores_by_player, config, stroke_index)

    winner = None
    if scores:
        low = min(scores.values())
        low_players = [player for player, score in scores.items() if score == low]
        if len(low_players) == 1:
            winner = low_players[0]

    if winner is not None:
        awarded = 1 + state.carryover_count
        logger.debug(f'Hole {hole_number}: {winner} wins {awarded} skin(s)')
        return SkinsState(
            carryover_count=0,
            per_hole_log=state.per_hole_log + (SkinsHoleResult(hole_number, winner, awarded),),
        )

    # Tied low score, or no scores at all: nobody wins the hole
    carryover = state.carryover_count + 1 if config.carryover_enabled else state.carryover_count
    logger.debug(f'Hole {hole_number}: no outright winner, {carryover} skin(s) carried')
    return SkinsState(
        carryover_count=carryover,
        per_hole_log=state.per_hole_log + (SkinsHoleResult(hole_number, None, 0),),
    )


def carryover_pending(state: SkinsState) -> int:
    """Skins riding on the next decisive hole, besides that hole's own."""
    return state.carryover_count


def derive_skins_leaderboard(
    state: SkinsState,
    skin_value: float,
    players: Optional[Iterable[str]] = None,
) -> list[SkinsLeaderboardEntry]:
    """
    Skins won and winnings per player, most skins first.

    Args:
        state: Skins state to read
        skin_value: Value of one skin
        players: Players to list even if they won nothing, in display order

    Returns:
        Leaderboard entries sorted by skins won (ties keep their order)
    """
    entries: dict[str, SkinsLeaderboardEntry] = {}
    for player in players or ():
        entries[player] = SkinsLeaderboardEntry(player=player)

    for hole in state.per_hole_log:
        if hole.winner is None:
            continue
        entry = entries.setdefault(hole.winner, SkinsLeaderboardEntry(player=hole.winner))
        entry.skins_won += hole.skins_awarded
        entry.holes_won.append(hole.hole_number)

    for entry in entries.values():
        entry.total_value = entry.skins_won * skin_value

    return sorted(entries.values(), key=lambda e: e.skins_won, reverse=True)
