import os
from pathlib import Path

# --- Path Configuration ---
# Use the MARKOVTEXTHOME env var for the project root, with a fallback.
# Relative corpus filenames are resolved against RESOURCE_DIR.
PROJECT_ROOT = Path(os.environ.get('MARKOVTEXTHOME', Path(__file__).parent.parent))
RESOURCE_DIR = Path(os.environ.get('MARKOVTEXT_RES_DIR', PROJECT_ROOT / 'res'))

# --- Model Configuration ---
DEFAULT_PREFIX_LENGTH = 1
DEFAULT_SUFFIX_LENGTH = 1

# --- Generation Configuration ---
DEFAULT_OUTPUT_LENGTH = 1000

# --- Corpus Scanning ---
# Number of worker processes used to scan the corpus. 1 disables multiprocessing.
try:
    NUM_WORKERS = int(os.environ.get('MARKOVTEXT_WORKERS', 1))
except ValueError:
    print(f"Warning: MARKOVTEXT_WORKERS={os.environ['MARKOVTEXT_WORKERS']!r} is not an integer. Using 1 worker.")
    NUM_WORKERS = 1
# Below this many windows the process pool costs more than it saves.
PARALLEL_MIN_WINDOWS = 100_000
