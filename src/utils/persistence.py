# src/utils/persistence.py
import json, time
from pathlib import Path

from utils.logger import LOG_DIR

def save_attempt_jsonl(record: dict, fname="attempts.jsonl", log_dir=None):
    out = Path(log_dir or LOG_DIR)
    out.mkdir(parents=True, exist_ok=True)
    path = out / fname
    record = {"timestamp": time.time(), **record}
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")
    return str(path)

def load_attempts(fname="attempts.jsonl", log_dir=None):
    path = Path(log_dir or LOG_DIR) / fname
    if not path.exists():
        return []
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]
