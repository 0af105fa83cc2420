"""Application settings."""

import os
from pathlib import Path

# Parliament
TOTAL_SEATS = 150
MAJORITY_THRESHOLD = 76
VOTE_PCT_TOLERANCE = 0.01
DEFAULT_TOTAL_VOTERS = 10_300_000

# Scenarios: omit a scenario once more than half of its parties are missing
SCENARIO_MIN_COVERAGE = 0.5

# Analysis
ANALYSIS_BUDGET_MS = 5000.0

# Logging (file sink is opt-in)
LOG_DIR = Path(os.getenv("COALITION_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("COALITION_LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("COALITION_LOG_TO_FILE", "false").lower() in ("1", "true", "yes")
LOG_RETENTION = os.getenv("COALITION_LOG_RETENTION", "7 days")
