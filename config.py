import logging
import yaml
from pathlib import Path
from typing import Any, List

from .catalog import PlayCatalog
from .datatypes import Invoice, Performance, Play
from .errors import ConfigError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / 'data'
DEFAULT_PLAYS_PATH = DATA_DIR / 'plays.yaml'
DEFAULT_INVOICES_PATH = DATA_DIR / 'invoices.yaml'


def _read_yaml(path: Path) -> Any:
    """Read a YAML (or JSON, which YAML accepts) file"""
    path = Path(path)
    logger.debug(f"Loading {path}")
    try:
        return yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.debug(f"Failed to read {path}: {e}")
        raise ConfigError(f"{path}: {e}") from e


def load_catalog(path: Path = DEFAULT_PLAYS_PATH) -> PlayCatalog:
    """
    Load the play catalog.

    Expected shape (optionally nested under a top-level ``plays`` key):

        hamlet:
          name: Hamlet
          type: tragedy
    """
    cfg = _read_yaml(path)
    if isinstance(cfg, dict) and 'plays' in cfg:
        cfg = cfg['plays']
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path}: expected a mapping of play ids to plays")

    plays = {}
    for play_id, body in cfg.items():
        if not isinstance(body, dict) or 'name' not in body:
            raise ConfigError(f"{path}: play {play_id!r} needs a name")
        genre = body.get('type', body.get('genre'))
        if genre is None:
            raise ConfigError(f"{path}: play {play_id!r} needs a type")
        # genre is kept as written; pricing rejects the ones it cannot price
        plays[str(play_id)] = Play(name=str(body['name']), genre=str(genre))

    logger.info(f"Loaded {len(plays)} plays from {path}")
    return PlayCatalog(plays)


def load_invoices(path: Path = DEFAULT_INVOICES_PATH) -> List[Invoice]:
    """Load one invoice or a list of invoices."""
    cfg = _read_yaml(path)
    if isinstance(cfg, dict) and 'invoices' in cfg:
        cfg = cfg['invoices']
    if isinstance(cfg, dict):
        cfg = [cfg]
    if not isinstance(cfg, list):
        raise ConfigError(f"{path}: expected an invoice or a list of invoices")

    out = [_parse_invoice(body, path) for body in cfg]
    logger.info(f"Loaded {len(out)} invoice(s) from {path}")
    return out


def _parse_invoice(body, path) -> Invoice:
    if not isinstance(body, dict) or 'customer' not in body:
        raise ConfigError(f"{path}: invoice needs a customer")

    performances = []
    for perf in body.get('performances') or []:
        play_id = perf.get('playID', perf.get('play_id')) if isinstance(perf, dict) else None
        if play_id is None:
            raise ConfigError(f"{path}: performance for {body['customer']} needs a playID")
        if 'audience' not in perf:
            raise ConfigError(f"{path}: performance of {play_id} needs an audience")
        try:
            performances.append(Performance(play_id=str(play_id), audience=perf['audience']))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{path}: bad audience for {play_id}: {e}") from e

    return Invoice(customer=str(body['customer']), performances=performances)
