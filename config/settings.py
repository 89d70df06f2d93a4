"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == 'true'


class Settings:
    """
    ─── LOCAL CLIENT ────────────────────────────────────────────────────
    The game client serves its API and its WAMP event feed on the same
    loopback port with a self-signed certificate, so TLS verification is
    off unless VERIFY_SSL=true.
    ──────────────────────────────────────────────────────────────────────
    """

    # ── Local client endpoints ────────────────────────────────────────────
    LCU_BASE_URL: str  = os.getenv('LCU_BASE_URL', 'https://127.0.0.1:2999')
    LCU_WS_URL:   str  = os.getenv('LCU_WS_URL',   'wss://127.0.0.1:2999')
    VERIFY_SSL:   bool = _flag('VERIFY_SSL', 'false')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '10'))

    # ── Champion select pipeline ───────────────────────────────────────────
    # The chat roster is only complete a few seconds after the phase flips.
    SETTLE_DELAY_S:  float = float(os.getenv('SETTLE_DELAY_S', '5'))
    MATCH_BEG_INDEX: int   = int(os.getenv('MATCH_BEG_INDEX', '0'))
    MATCH_END_INDEX: int   = int(os.getenv('MATCH_END_INDEX', '21'))

    # 0 keeps every queue; 420 restricts the stats to solo/duo games.
    STATS_QUEUE_ID: Optional[int] = int(os.getenv('STATS_QUEUE_ID', '0')) or None

    LOOKUP_HOST: str = os.getenv('LOOKUP_HOST', 'www.op.gg')

    # Legacy behaviour re-ran the whole pipeline on every ChampSelect event.
    LEVEL_TRIGGERED: bool = _flag('LEVEL_TRIGGERED', 'false')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR:     Path = Path(__file__).resolve().parent.parent
    DATA_DIR:     Path = BASE_DIR / 'data'
    LOG_DIR:      Path = Path(os.getenv('LOG_DIR', str(DATA_DIR / 'logs')))
    OPTIONS_FILE: Path = Path(os.getenv('OPTIONS_FILE', str(BASE_DIR / 'config' / 'options.json')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if cls.MATCH_BEG_INDEX < 0 or cls.MATCH_END_INDEX < cls.MATCH_BEG_INDEX:
            raise ValueError(
                f"Invalid match window {cls.MATCH_BEG_INDEX}..{cls.MATCH_END_INDEX}"
            )

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
