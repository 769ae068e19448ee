"""Runs the storefront API under uvicorn.

Usage:
    python src/server.py                     # 0.0.0.0:3000
    python src/server.py --port 8000 --reload
"""

import argparse
import os

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Storefront API server")
    parser.add_argument("--host", default=os.environ.get("HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "3000")))
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args()

    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
