from pathlib import Path

def atomic_write_bytes(data: bytes, out: Path) -> None:
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_suffix(out.suffix + ".tmp")
    try:
        tmp.write_bytes(data)
        tmp.replace(out)         # atomic replace on same filesystem
    finally:
        if tmp.exists():
            tmp.unlink()
