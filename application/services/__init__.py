"""Application services root exports."""
from .display_options import DisplayOptions, load_display_options
from .lobby_observer import LobbyObserver, ObserverState
from .report_formatter import build_multisearch_link, build_player_report
from .statistics import derive_stats, kda, most_common_role, win_rate

__all__ = [
    "DisplayOptions",
    "LobbyObserver",
    "ObserverState",
    "build_multisearch_link",
    "build_player_report",
    "derive_stats",
    "kda",
    "load_display_options",
    "most_common_role",
    "win_rate",
]
