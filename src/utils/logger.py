# src/utils/logger.py
import logging, os
LOG_DIR = os.environ.get("DFA_LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "..", "logs"))
LOG_LEVEL = os.environ.get("DFA_LOG_LEVEL", "INFO").upper()

def resolve_level(name):
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO

def get_logger(name="dfa"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        os.makedirs(LOG_DIR, exist_ok=True)
        logger.setLevel(resolve_level(LOG_LEVEL))
        fh = logging.FileHandler(os.path.join(LOG_DIR, "project.log"))
        fmt = logging.Formatter('%(asctime)s %(levelname)s: %(message)s')
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger
