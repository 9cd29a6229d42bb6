# serialize/dependabot.py
from __future__ import annotations

from typing import Any, Dict

from ..dependabot import Dependabot, Update
from ..errors import IncompleteRequired
from .emitter import dump
from .records import join_path, projector, record


@projector(Update)
def update_data(update: Update, path: str) -> Dict[str, Any]:
    if not update.directory and not update.directories:
        raise IncompleteRequired("'directory' or 'directories' is required", path=join_path(path, "directory"))
    return record(update, path)


def dependabot_data(config: Dependabot) -> Dict[str, Any]:
    return record(config)


def dependabot_to_yaml(config: Dependabot) -> bytes:
    return dump(dependabot_data(config))
