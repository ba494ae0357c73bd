"""Installed model group data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelGroup:
    """A model family directory and the tags installed under it.

    Example: ``ModelGroup(group="deepseek-r1", models=("1.5b", "7b"))``
    """

    group: str
    models: tuple[str, ...]
