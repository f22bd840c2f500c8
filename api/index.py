import sys
import os
from pathlib import Path

# Vercel runs this file directly; make the project root importable
current_dir = Path(__file__).resolve().parent
project_root = current_dir.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("LOG_LEVEL", "INFO")

from novaria_proxy.main import app  # noqa: E402

__all__ = ["app"]
