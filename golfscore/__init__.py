from .models import (
    PuttingBaseline,
    LongGameBaseline,
    Shot,
    MatchState,
    MatchResult,
    SkinsHoleResult,
    SkinsState,
    SkinsLeaderboardEntry,
    CopenhagenHolePoints,
    UmbriagoHolePoints,
    WolfHoleResult,
)
from .schemas import ScoringConfig, SkinsConfig, WolfSettings
from .interpolation import interpolate, interpolate_putting, interpolate_long_game
from .baseline import (
    BaselineTables,
    parse_putting_baseline,
    parse_long_game_baseline,
    load_baseline_tables,
    get_default_baselines,
)
from .strokes_gained import (
    StrokesGainedCalculator,
    calculate_strokes_gained,
    calculate_ob_strokes_gained,
    validate_distance,
)
from .normalize import normalize_points, point_differentials
from .match_play import (
    new_match,
    hole_result,
    advance_match,
    play_match,
    is_closed_out,
    is_match_finished,
    final_result,
    format_match_status,
    format_match_status_with_holes,
)
from .skins import (
    new_skins_state,
    record_skins_hole,
    derive_skins_leaderboard,
    carryover_pending,
)
from .handicap import strokes_on_hole, net_score, match_stroke_allocation
from .formats import (
    best_ball,
    best_ball_hole_result,
    copenhagen_points,
    umbriago_team_low,
    umbriago_individual_low,
    umbriago_birdie_counts,
    umbriago_hole_points,
    umbriago_hole_result,
    umbriago_totals,
    umbriago_display_points,
    umbriago_roll,
    umbriago_payout,
    wolf_for_hole,
    wolf_hole_points,
    wolf_totals,
)

__all__ = [
    # Models
    'PuttingBaseline',
    'LongGameBaseline',
    'Shot',
    'MatchState',
    'MatchResult',
    'SkinsHoleResult',
    'SkinsState',
    'SkinsLeaderboardEntry',
    'CopenhagenHolePoints',
    'UmbriagoHolePoints',
    'WolfHoleResult',
    # Configuration schemas
    'ScoringConfig',
    'SkinsConfig',
    'WolfSettings',
    # Interpolation and baselines
    'interpolate',
    'interpolate_putting',
    'interpolate_long_game',
    'BaselineTables',
    'parse_putting_baseline',
    'parse_long_game_baseline',
    'load_baseline_tables',
    'get_default_baselines',
    # Strokes gained
    'StrokesGainedCalculator',
    'calculate_strokes_gained',
    'calculate_ob_strokes_gained',
    'validate_distance',
    # Point normalization
    'normalize_points',
    'point_differentials',
    # Match play
    'new_match',
    'hole_result',
    'advance_match',
    'play_match',
    'is_closed_out',
    'is_match_finished',
    'final_result',
    'format_match_status',
    'format_match_status_with_holes',
    # Skins
    'new_skins_state',
    'record_skins_hole',
    'derive_skins_leaderboard',
    'carryover_pending',
    # Handicaps and formats
    'strokes_on_hole',
    'net_score',
    'match_stroke_allocation',
    'best_ball',
    'best_ball_hole_result',
    'copenhagen_points',
    'umbriago_team_low',
    'umbriago_individual_low',
    'umbriago_birdie_counts',
    'umbriago_hole_points',
    'umbriago_hole_result',
    'umbriago_totals',
    'umbriago_display_points',
    'umbriago_roll',
    'umbriago_payout',
    'wolf_for_hole',
    'wolf_hole_points',
    'wolf_totals',
]
