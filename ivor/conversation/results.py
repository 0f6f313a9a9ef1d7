"""What a script handler hands back to the router."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Reply:
    text: str


@dataclass(frozen=True)
class ReturnToMenu:
    """The user asked to leave the script; the router clears it and shows the menu."""


ScriptResult = Union[Reply, ReturnToMenu]
