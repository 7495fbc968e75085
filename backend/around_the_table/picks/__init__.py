"""
Pick ledger, result matching and backups.
"""

from .ledger import (
    PENDING,
    seed_players,
    new_state,
    add_pick,
    resolve,
    record_result,
    update_player_stats,
    refresh_current_week,
    player_history,
    current_week_picks,
    filter_picks,
    player_stats,
    week_stats,
    tally_standings,
    LedgerError,
    UnknownPlayerError,
    PickNotFoundError,
    PickAlreadyResolvedError,
)
from .results import (
    normalize_team_name,
    find_game_result,
    format_score,
    resolve_pick,
    pending_picks,
    apply_completed_games,
    check_records,
)
from .backup import decode_players, decode_picks, export_state, import_state

__all__ = [
    # Ledger
    "PENDING",
    "seed_players",
    "new_state",
    "add_pick",
    "resolve",
    "record_result",
    "update_player_stats",
    "refresh_current_week",
    "player_history",
    "current_week_picks",
    "filter_picks",
    "player_stats",
    "week_stats",
    "tally_standings",
    "LedgerError",
    "UnknownPlayerError",
    "PickNotFoundError",
    "PickAlreadyResolvedError",
    # Results
    "normalize_team_name",
    "find_game_result",
    "format_score",
    "resolve_pick",
    "pending_picks",
    "apply_completed_games",
    "check_records",
    # Backup
    "decode_players",
    "decode_picks",
    "export_state",
    "import_state",
]
