"""
Configuration for the arithmetic expression evaluator
"""

import os
from pathlib import Path

# Meta
APP_NAME = "Arithmetic Expression Evaluator"
VERSION = "1.0.0"

# Logging
LOG_DIR = Path(os.environ.get("ARITH_EVAL_LOG_DIR", "logs"))
LOG_FILE_PATTERN = "arith_eval_{date}.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL = os.environ.get("ARITH_EVAL_LOG_LEVEL", "INFO").upper()

# History
HISTORY_LIMIT = None    # None keeps every entry
HISTORY_DISPLAY = 20    # rows shown by the History menu option

# Results outside this magnitude range are printed in scientific notation
SCIENTIFIC_LOW = 1e-10
SCIENTIFIC_HIGH = 1e10
