"""
Wrapper file for launching the dashboard with ``streamlit run streamlit_app.py``.
"""

from __future__ import annotations

import sys
from pathlib import Path

# ---------------------------------------------------------
# 1. Add /src to PATH so a plain checkout can import palcheck/*
# ---------------------------------------------------------
ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from palcheck.app_streamlit import main  # noqa: E402

main()
