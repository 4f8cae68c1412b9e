import logging
from pathlib import Path

logger = logging.getLogger("gazetteer_i18n")

# Relative to the working directory of the run
DEFAULT_GAZETTEER_FILE = Path("gazetteer.csv")
DEFAULT_TARGET_DIR = Path("target")
