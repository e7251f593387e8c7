"""Configuration for ramp-palette: .env loading and RAMP_PALETTE_* settings.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  RAMP_PALETTE_FORMAT     default format name for the CLI (default: zpl)
  RAMP_PALETTE_LOG_LEVEL  logging level name (default: WARNING)
"""

import os
from pathlib import Path

ENV_FORMAT = 'RAMP_PALETTE_FORMAT'
ENV_LOG_LEVEL = 'RAMP_PALETTE_LOG_LEVEL'

DEFAULTS = {
    'format': 'zpl',
    'log_level': 'WARNING',
}


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return the first .env found, stop at the .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes around the value are stripped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def settings() -> dict[str, str]:
    """Current settings from the environment, falling back to DEFAULTS."""
    return {
        'format': os.environ.get(ENV_FORMAT) or DEFAULTS['format'],
        'log_level': (os.environ.get(ENV_LOG_LEVEL) or DEFAULTS['log_level']).upper(),
    }
