"""Visibility of a documented item."""

from enum import Enum


class Visibility(str, Enum):
    """Whether an item is reachable from outside its crate."""

    PUBLIC = "public"
    RESTRICTED = "restricted"
