"""Data models for the golfscore scoring core."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import LONG_GAME_LIES


@dataclass(frozen=True)
class PuttingBaseline:
    """Expected putts to hole out from a distance (feet)."""
    distance: float
    expected_strokes: float


@dataclass(frozen=True)
class LongGameBaseline:
    """Expected strokes to hole out from a distance (yards), one value per lie.

    A lie left as None has no baseline at this distance.
    """
    distance: float
    tee: Optional[float] = None
    fairway: Optional[float] = None
    rough: Optional[float] = None
    sand: Optional[float] = None

    def value_for(self, lie: Optional[str]) -> Optional[float]:
        if lie not in LONG_GAME_LIES:
            return None
        return getattr(self, lie)


@dataclass(frozen=True)
class Shot:
    """A single recorded stroke on a hole."""
    type: str  # tee | approach | putt
    start_distance: float
    start_lie: str
    holed: bool
    end_lie: Optional[str] = None
    end_distance: Optional[float] = None
    strokes_gained: float = 0.0
    is_ob: bool = False


@dataclass(frozen=True)
class MatchState:
    """Running match-play status, from side A's perspective."""
    status_value: int
    holes_remaining: int


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a finished (or closed-out) match."""
    winner: Optional[str]  # 'A', 'B' or None when halved
    result: str  # "3 & 2", "1 Up", "All Square"
    margin: int = 0
    holes_remaining: int = 0


@dataclass(frozen=True)
class SkinsHoleResult:
    """One entry in the skins per-hole log."""
    hole_number: int
    winner: Optional[str]
    skins_awarded: int


@dataclass(frozen=True)
class SkinsState:
    """Skins game state: pending carryover plus the log of recorded holes."""
    carryover_count: int = 0
    per_hole_log: Tuple[SkinsHoleResult, ...] = field(default_factory=tuple)

    @property
    def last_hole(self) -> Optional[int]:
        if not self.per_hole_log:
            return None
        return self.per_hole_log[-1].hole_number


@dataclass
class SkinsLeaderboardEntry:
    """A player's standing in a skins game."""
    player: str
    skins_won: int = 0
    total_value: float = 0.0
    holes_won: list = field(default_factory=list)  # hole numbers with skins taken


@dataclass(frozen=True)
class CopenhagenHolePoints:
    """Points split for one Copenhagen hole, keyed by player."""
    points: dict
    is_sweep: bool = False
    sweep_winner: Optional[str] = None


@dataclass(frozen=True)
class UmbriagoHolePoints:
    """Raw points for one Umbriago hole, multiplier already applied."""
    team_a: int
    team_b: int
    is_umbriago: bool = False
    sweep_strokes: Optional[int] = None  # net strokes under par on a sweep


@dataclass(frozen=True)
class WolfHoleResult:
    """Winning side ('wolf', 'opponents' or 'tie') and points by player."""
    winning_side: str
    points: dict
