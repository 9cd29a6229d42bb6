from __future__ import annotations
import os

SOURCE = os.environ.get("GHWIRE_SOURCE", ".")
OUTPUT = os.environ.get("GHWIRE_OUTPUT", ".")
DEBUG = os.environ.get("GHWIRE_DEBUG", "").strip().lower() in ("1", "true", "yes", "on")
