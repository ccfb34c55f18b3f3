#!/usr/bin/env python3
"""
CoWIN dashboard server entry point.
"""

import argparse

import uvicorn

from .core.config import load_config
from .core.server import create_app


def main():
    """Main entry point for the CoWIN dashboard."""
    parser = argparse.ArgumentParser(description="CoWIN vaccination dashboard")
    parser.add_argument("-c", "--config", help="Path to YAML config", default="config.yaml")
    args = parser.parse_args()

    config = load_config(args.config)
    app = create_app(config)

    uvicorn.run(app, host=config.host, port=config.port, reload=False, access_log=False)


if __name__ == "__main__":
    main()
