"""Serialization package."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cattrs import Converter


def get_config_converter() -> Converter:
    """Get a :class:`Converter` for configuration documents."""
    from oes.eventdesk.serialization.config import converter

    return converter
