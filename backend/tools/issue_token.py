#!/usr/bin/env python3
"""
Print a bearer token for a username, for poking at the API locally.

Usage:
    python tools/issue_token.py admin --ttl 3600
"""
import argparse
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.security import create_access_token

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("username")
    parser.add_argument("--ttl", type=int, default=None, help="lifetime in seconds")
    args = parser.parse_args()
    print(create_access_token(args.username, ttl_seconds=args.ttl))
