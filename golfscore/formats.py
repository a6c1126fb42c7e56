"""Game format adapters.

Formats reduce their own hole data to what the shared engines consume:
a signed hole result for match play, or raw point totals for display
through normalize_points.
"""

import math
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from .constants import (
    COPENHAGEN_POINTS_PER_HOLE,
    OPPONENTS_SIDE,
    TEAM_A,
    TEAM_B,
    TIED_SIDE,
    UMBRIAGO_MULTIPLIERS,
    UMBRIAGO_PAYOUT_MODES,
    UMBRIAGO_SWEEP_POINTS,
    WOLF_POSITIONS,
    WOLF_SIDE,
)
from .match_play import hole_result
from .models import CopenhagenHolePoints, UmbriagoHolePoints, WolfHoleResult
from .normalize import normalize_points
from .schemas import WolfSettings

TeamScores = Sequence[Optional[int]]


def best_ball(scores: Mapping[str, Optional[int]]) -> Tuple[Optional[int], Optional[str]]:
    """
    Lowest score on a team for one hole.

    Args:
        scores: player -> score (gross or net), None when not entered

    Returns:
        (best score, counting player), or (None, None) when nobody scored.
        On a tie the first player listed counts.
    """
    best_score = None
    counting_player = None
    for player, score in scores.items():
        if score is None:
            continue
        if best_score is None or score < best_score:
            best_score = score
            counting_player = player
    return best_score, counting_player


def best_ball_hole_result(
    team_a_scores: Mapping[str, Optional[int]],
    team_b_scores: Mapping[str, Optional[int]],
) -> int:
    """Match play result for a best ball hole, team A as side A."""
    a_best, _ = best_ball(team_a_scores)
    b_best, _ = best_ball(team_b_scores)
    return hole_result(a_best, b_best)


def copenhagen_points(scores: Mapping[str, int], par: int) -> CopenhagenHolePoints:
    """
    Split a Copenhagen (six point) hole between three players.

    Points by finish: 4-2-0. Tie for low 3-3-0, tie for second 4-1-1,
    three-way tie 2-2-2. A birdie or better that beats both others by two
    or more sweeps 6-0-0.

    Raises:
        ValueError: If there are not exactly three scores
    """
    if len(scores) != 3:
        raise ValueError(f'Copenhagen needs exactly 3 players, got {len(scores)}')

    ranked = sorted(scores.items(), key=lambda item: item[1])
    (first, low), (second, middle), (third, high) = ranked

    if low <= par - 1 and middle - low >= 2 and high - low >= 2:
        points = {player: 0 for player in scores}
        points[first] = COPENHAGEN_POINTS_PER_HOLE
        return CopenhagenHolePoints(points=points, is_sweep=True, sweep_winner=first)

    if low == middle == high:
        split = (2, 2, 2)
    elif low == middle:
        split = (3, 3, 0)
    elif middle == high:
        split = (4, 1, 1)
    else:
        split = (4, 2, 0)

    points = {player: 0 for player in scores}
    for (player, _), value in zip(ranked, split):
        points[player] = value
    return CopenhagenHolePoints(points=points)


# Umbriago: two teams of two. Each hole awards a point for team low,
# individual low and closest to the pin, plus one per birdie or better.

def umbriago_team_low(team_a: TeamScores, team_b: TeamScores) -> Optional[str]:
    """
    Team with the lower combined score, or None on a tie.

    A team with a missing score cannot win the category; when both teams
    are missing a score nobody does.
    """
    a_missing = any(score is None for score in team_a)
    b_missing = any(score is None for score in team_b)
    if a_missing and b_missing:
        return None
    if a_missing:
        return TEAM_B
    if b_missing:
        return TEAM_A

    a_total, b_total = sum(team_a), sum(team_b)
    if a_total < b_total:
        return TEAM_A
    if b_total < a_total:
        return TEAM_B
    return None


def umbriago_individual_low(team_a: TeamScores, team_b: TeamScores) -> Optional[str]:
    """Team holding the single lowest score; None if both teams share it."""
    entered = [(TEAM_A, s) for s in team_a if s is not None and s > 0]
    entered += [(TEAM_B, s) for s in team_b if s is not None and s > 0]
    if not entered:
        return None

    low = min(score for _, score in entered)
    teams = {team for team, score in entered if score == low}
    return teams.pop() if len(teams) == 1 else None


def umbriago_birdie_counts(team_a: TeamScores, team_b: TeamScores, par: int) -> Tuple[int, int]:
    """Birdies or better per team."""
    def count(team):
        return sum(1 for score in team if score is not None and score < par)
    return count(team_a), count(team_b)


def _strokes_under_par(team: TeamScores, par: int) -> int:
    return sum(max(0, par - score) for score in team if score is not None)


def umbriago_hole_points(
    team_a: TeamScores,
    team_b: TeamScores,
    par: int,
    closest_to_pin: Optional[str] = None,
    multiplier: int = 1,
) -> UmbriagoHolePoints:
    """
    Score one Umbriago hole.

    A team that wins team low, individual low and closest to the pin and
    makes at least one birdie has an Umbriago: instead of category points it
    scores 8 for every net stroke under par (its strokes under par less the
    other team's), and the other team scores nothing. The hole multiplier
    (1, doubled 2, double-back 4) applies last.

    Args:
        team_a: Team A's two scores, None when not entered
        team_b: Team B's two scores
        par: Hole par
        closest_to_pin: 'A', 'B' or None
        multiplier: 1, 2 or 4

    Raises:
        ValueError: On an unknown multiplier or closest-to-pin team
    """
    if multiplier not in UMBRIAGO_MULTIPLIERS:
        raise ValueError(f'Umbriago multiplier must be 1, 2 or 4, got {multiplier}')
    if closest_to_pin not in (None, TEAM_A, TEAM_B):
        raise ValueError(f'Unknown closest to pin team {closest_to_pin!r}')

    categories = (
        umbriago_team_low(team_a, team_b),
        umbriago_individual_low(team_a, team_b),
        closest_to_pin,
    )
    a_birdies, b_birdies = umbriago_birdie_counts(team_a, team_b, par)
    a_points = categories.count(TEAM_A) + a_birdies
    b_points = categories.count(TEAM_B) + b_birdies

    sweeper = None
    if categories == (TEAM_A,) * 3 and a_birdies:
        sweeper = TEAM_A
    elif categories == (TEAM_B,) * 3 and b_birdies:
        sweeper = TEAM_B

    if sweeper is None:
        return UmbriagoHolePoints(team_a=a_points * multiplier, team_b=b_points * multiplier)

    a_under = _strokes_under_par(team_a, par)
    b_under = _strokes_under_par(team_b, par)
    net_under = a_under - b_under if sweeper == TEAM_A else b_under - a_under
    sweep_points = net_under * UMBRIAGO_SWEEP_POINTS * multiplier
    return UmbriagoHolePoints(
        team_a=sweep_points if sweeper == TEAM_A else 0,
        team_b=sweep_points if sweeper == TEAM_B else 0,
        is_umbriago=True,
        sweep_strokes=net_under,
    )


def umbriago_hole_result(points: UmbriagoHolePoints) -> int:
    """Match play result for an Umbriago hole: more points wins."""
    return hole_result(-points.team_a, -points.team_b)


def umbriago_totals(holes: Iterable[UmbriagoHolePoints]) -> Tuple[int, int]:
    """Raw (team A, team B) totals over the holes played."""
    a_total = b_total = 0
    for hole in holes:
        a_total += hole.team_a
        b_total += hole.team_b
    return a_total, b_total


def umbriago_display_points(holes: Iterable[UmbriagoHolePoints]) -> Tuple[int, int]:
    """Totals shifted so the trailing team shows 0."""
    return normalize_points(*umbriago_totals(holes))


def umbriago_roll(difference: int, stake: float) -> Tuple[int, float]:
    """
    Roll the game: halve the point difference (rounding up) and double
    the stake per point.
    """
    return math.ceil(abs(difference) / 2), stake * 2


def umbriago_payout(
    team_a_points: int,
    team_b_points: int,
    stake_per_point: float,
    mode: str = 'difference',
) -> Tuple[Optional[str], float]:
    """
    Settle an Umbriago game from raw totals.

    'difference' pays the gap between the teams, 'total' pays the winning
    team's whole total.

    Returns:
        (winning team, amount), or (None, 0.0) on a tie
    """
    if mode not in UMBRIAGO_PAYOUT_MODES:
        raise ValueError(f'Unknown payout mode {mode!r}')
    if team_a_points == team_b_points:
        return None, 0.0

    winner = TEAM_A if team_a_points > team_b_points else TEAM_B
    if mode == 'difference':
        points = abs(team_a_points - team_b_points)
    else:
        points = max(team_a_points, team_b_points)
    return winner, points * stake_per_point


def wolf_for_hole(hole_number: int, players: Sequence[str], wolf_position: str = 'last') -> str:
    """
    Player who is the wolf on a hole.

    The wolf rotates through the tee order. Teeing off 'last', the final
    player is wolf on hole 1 and the first player on hole 2; teeing off
    'first', player one is wolf on hole 1.
    """
    if wolf_position not in WOLF_POSITIONS:
        raise ValueError(f'wolf_position must be first or last, got {wolf_position}')
    if not players:
        raise ValueError('Wolf needs at least one player')

    count = len(players)
    if wolf_position == 'last':
        return players[(hole_number - 2) % count]
    return players[(hole_number - 1) % count]


def wolf_hole_points(
    scores: Mapping[str, Optional[int]],
    wolf: str,
    partner: Optional[str] = None,
    settings: Optional[WolfSettings] = None,
) -> WolfHoleResult:
    """
    Score a Wolf hole, best ball of each side.

    With no partner the wolf plays alone against everyone else. A lone wolf
    who wins takes lone_wolf_win_points; one who loses gives each opponent
    lone_wolf_loss_points. With a partner, every player on the winning side
    takes team_win_points. Ties and holes where the wolf has no score pay
    nothing. A side with no scores entered loses to any score.

    Args:
        scores: player -> score, in tee order
        wolf: Player who is wolf on this hole
        partner: Player the wolf picked, None for lone wolf
        settings: Points settings (default: WolfSettings())

    Raises:
        ValueError: If the wolf or partner is not in the group
    """
    if settings is None:
        settings = WolfSettings()
    if wolf not in scores:
        raise ValueError(f'Wolf {wolf!r} is not in the group')
    if partner is not None and (partner not in scores or partner == wolf):
        raise ValueError(f'Invalid wolf partner {partner!r}')

    points = {player: 0 for player in scores}
    if scores[wolf] is None:
        return WolfHoleResult(winning_side=TIED_SIDE, points=points)

    wolf_side = [wolf] if partner is None else [wolf, partner]
    opponents = [player for player in scores if player not in wolf_side]

    wolf_best = min(scores[p] for p in wolf_side if scores[p] is not None)
    opponent_scores = [scores[p] for p in opponents if scores[p] is not None]
    opponents_best = min(opponent_scores) if opponent_scores else None

    if opponents_best is None or wolf_best < opponents_best:
        winning_side = WOLF_SIDE
    elif opponents_best < wolf_best:
        winning_side = OPPONENTS_SIDE
    else:
        return WolfHoleResult(winning_side=TIED_SIDE, points=points)

    if partner is None:
        if winning_side == WOLF_SIDE:
            points[wolf] = settings.lone_wolf_win_points
        else:
            for player in opponents:
                points[player] = settings.lone_wolf_loss_points
    else:
        for player in wolf_side if winning_side == WOLF_SIDE else opponents:
            points[player] = settings.team_win_points

    return WolfHoleResult(winning_side=winning_side, points=points)


def wolf_totals(results: Iterable[WolfHoleResult]) -> dict:
    """Running points by player over the holes played."""
    totals: dict = {}
    for result in results:
        for player, points in result.points.items():
            totals[player] = totals.get(player, 0) + points
    return totals
