import os
import sys

# --- Generation Configuration ---
# Seed used by the command line when the mode is anything other than RANDOM_MODE.
DEFAULT_SEED = 20
RANDOM_MODE = "random"

# Returned by the sampler when a rounding gap leaves the draw above the last
# cumulative probability. Kept as a space for compatibility with older output.
_fallback = os.environ.get('CHARLM_FALLBACK_CHAR', ' ')
if len(_fallback) != 1:
    print(f"Warning: CHARLM_FALLBACK_CHAR must be a single character, got {_fallback!r}. Using a space.", file=sys.stderr)
    _fallback = ' '
FALLBACK_CHAR = _fallback

# --- Corpus Configuration ---
CORPUS_ENCODING = os.environ.get('CHARLM_ENCODING', 'utf-8')
READ_CHUNK_SIZE = 64 * 1024  # characters per read

# --- Output Configuration ---
SHOW_PROGRESS = os.environ.get('CHARLM_PROGRESS', '').lower() in ('1', 'true', 'yes')
LOG_FORMAT = '%(levelname)s: %(message)s'
