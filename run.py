#!/usr/bin/env python3
"""
holdembot - Server Startup Script

Usage:
    python run.py [--host HOST] [--port PORT] [--reload]

Table settings come from HOLDEMBOT_* environment variables.
"""

import argparse
import uvicorn


def main():
    parser = argparse.ArgumentParser(description="holdembot server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    args = parser.parse_args()

    uvicorn.run(
        "holdembot.server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
