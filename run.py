#!/usr/bin/env python3
"""Run the API server, or the Streamlit dashboard.

Usage:
    python run.py              # HTTP API on VOTES_API_HOST:VOTES_API_PORT
    python run.py dashboard    # Streamlit dashboard
"""

import subprocess
import sys
from pathlib import Path

import uvicorn

from settings import API_HOST, API_PORT, LOG_LEVEL
from settings.logging import setup_logging


def main():
    args = sys.argv[1:]

    if args[:1] == ["dashboard"]:
        app = Path(__file__).parent / "web" / "streamlit" / "app.py"
        subprocess.run([sys.executable, "-m", "streamlit", "run", str(app)])
        return

    if args:
        print(__doc__)
        sys.exit(1)

    setup_logging(level=LOG_LEVEL, to_file=True, component="api")

    from web.server import create_app

    uvicorn.run(create_app(), host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
