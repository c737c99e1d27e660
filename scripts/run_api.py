#!/usr/bin/env python
"""
Serve the statement API with uvicorn.

Usage:
    python scripts/run_api.py [--host 127.0.0.1] [--port 8000] [--reload]
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(description="Serve the statement API")
    parser.add_argument('--host', default="127.0.0.1")
    parser.add_argument('--port', type=int, default=8000)
    parser.add_argument('--reload', action='store_true')
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent

    # src must be importable by the uvicorn subprocess
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(project_root / "src"), env.get("PYTHONPATH")) if p
    )

    cmd = [sys.executable, "-m", "uvicorn", "theater_billing.api.main:app",
           "--host", args.host, "--port", str(args.port)]
    if args.reload:
        cmd.append("--reload")

    print(f"Statement API listening on http://{args.host}:{args.port}")
    try:
        subprocess.run(cmd, env=env, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
