#!/usr/bin/env python
"""
Open the statement viewer (Streamlit).

Usage:
    python scripts/run_app.py [--port 8501]
"""
import argparse
import subprocess
import sys
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(description="Run the statement viewer")
    parser.add_argument('--port', type=int, default=8501)
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    viewer = project_root / 'src' / 'theater_billing' / 'ui' / 'app_streamlit.py'
    if not viewer.exists():
        print(f"ERROR: statement viewer missing at {viewer}")
        sys.exit(1)

    cmd = [sys.executable, '-m', 'streamlit', 'run', str(viewer), '--server.port', str(args.port)]
    print(f"Starting statement viewer on port {args.port}")
    try:
        subprocess.run(cmd, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nViewer stopped.")


if __name__ == "__main__":
    main()
