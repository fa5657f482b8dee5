"""
Identity resolution and tag expansion.

Resolves the application and task identity of a container from its labels
and environment, and expands them into the hierarchical tags attached to
every forwarded stats snapshot.
"""

from .resolver import IdentityResolver, extract_env, trim_prefix
from .tags import TagSetBuilder, build_tag_set, expand_app, expand_task

__all__ = [
    "IdentityResolver",
    "extract_env",
    "trim_prefix",
    "TagSetBuilder",
    "build_tag_set",
    "expand_app",
    "expand_task",
]
