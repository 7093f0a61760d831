"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Title colour can be overridden via environment or project .env file.
"""
from __future__ import annotations
import os, sys
from pathlib import Path

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI foreground escape sequence."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    # approximate on the xterm 256-color cube
    r6, g6, b6 = (int(round(x / 255 * 5)) for x in (r, g, b))
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"

RESET = _code('0')
BOLD = _code('1')

HEX_PRIMARY_DEFAULT = '#476EAE'

def _load_env_overrides(env_path: Path) -> dict[str, str]:
    """Read TEAM_* hex colours from a .env file; malformed lines are skipped."""
    overrides: dict[str, str] = {}
    if not env_path.exists():
        return overrides
    for line in env_path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k, v = k.strip(), v.strip()
        if k == 'TEAM_PRIMARY' and _is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides

_ENV_OVERRIDES = _load_env_overrides(Path(__file__).resolve().parent.parent / '.env')

# priority: real env var > .env override > default
HEX_PRIMARY = str(os.environ.get('TEAM_PRIMARY') or _ENV_OVERRIDES.get('TEAM_PRIMARY', HEX_PRIMARY_DEFAULT))
if not _is_hex(HEX_PRIMARY):
    HEX_PRIMARY = HEX_PRIMARY_DEFAULT

TITLE_COLOR = _from_hex(HEX_PRIMARY) + BOLD

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = ['color', 'RESET', 'BOLD', 'TITLE_COLOR', 'HEX_PRIMARY', '_ENABLE', '_USE_TRUECOLOR', '_FORCE']
