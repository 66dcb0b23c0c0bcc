from __future__ import annotations
import os, sys
from pathlib import Path
# --- Force UTF-8 stdio on Windows (verdict badges use emoji) ---
if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    except ValueError:
        pass
os.environ.setdefault("PYTHONIOENCODING", "utf-8")
# ------------------------------------
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from phishcheck.cli.app import main

if __name__ == "__main__":
    main()
