"""
Expansion of identities into hierarchical tags.

An app identity such as ``/infra/web/api`` becomes::

    app_id  /infra/web/api
    app     api
    group   infra/web
    group1  infra/web

and a task identity such as ``worker-7.canary`` becomes::

    task   worker-7.canary
    task1  worker
    task2  7
    task3  canary
"""

import re
from types import MappingProxyType
from typing import Dict, Mapping

from ..models.container import Identity

ROOT_GROUP = "/"

_TASK_SEPARATOR = re.compile(r"[-.]")


class TagSetBuilder:
    """Accumulates tags and publishes them as a read-only mapping."""

    def __init__(self):
        self._tags: Dict[str, str] = {}

    def add(self, key: str, value: str) -> "TagSetBuilder":
        if key in self._tags:
            raise ValueError(f"Duplicate tag key: {key}")
        self._tags[key] = value
        return self

    def build(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self._tags))


def expand_app(builder: TagSetBuilder, app: str) -> TagSetBuilder:
    """
    Add ``app_id``, ``app``, ``group`` and ``group1..groupK`` tags.

    The last ``/`` separated segment is the app name, the leading segments
    form the group path. A leading empty segment (absolute app id) is not a
    group component. Group tags only appear once the group path has at
    least two segments; otherwise ``group`` is ``/``.
    """
    builder.add("app_id", app)

    segments = app.split("/")
    builder.add("app", segments[-1])

    groups = segments[:-1]
    if groups and groups[0] == "":
        groups = groups[1:]

    if len(groups) <= 1:
        builder.add("group", ROOT_GROUP)
        return builder

    builder.add("group", "/".join(groups))
    for i in range(1, len(groups)):
        builder.add(f"group{i}", "/".join(groups[:i + 1]))
    return builder


def expand_task(builder: TagSetBuilder, task: str) -> TagSetBuilder:
    """Add ``task`` and one ``taskN`` tag per ``-``/``.`` separated segment."""
    builder.add("task", task)
    for i, segment in enumerate(_TASK_SEPARATOR.split(task), start=1):
        builder.add(f"task{i}", segment)
    return builder


def build_tag_set(identity: Identity) -> Mapping[str, str]:
    """Expand a resolved identity into its immutable tag set."""
    builder = TagSetBuilder()
    expand_app(builder, identity.app)
    expand_task(builder, identity.task)
    return builder.build()
