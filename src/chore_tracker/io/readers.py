from pathlib import Path

def _ensure_exists(path: Path):
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"file not found: {p}")

def read_text(path: Path) -> str:
    _ensure_exists(path)
    return Path(path).read_text(encoding="utf-8")
