"""Helpers operating on the top and bottom caption styles together."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from mememaker.models.text_style import TextStyle
from mememaker.utils.config import BOTTOM_ATTR_KEY, TOP_ATTR_KEY

logger = logging.getLogger(__name__)


def clear_texts(
    keys: Iterable[str],
    load: Callable[[str], TextStyle],
    save: Callable[[str, TextStyle], bool],
) -> bool:
    """Empty the text of each stored caption and restore default styling.

    Returns:
        True if every save succeeded.
    """
    ok = True
    for key in keys:
        style = load(key)
        style.text = ""
        style.set_default()
        if not save(key, style):
            logger.warning(f"Could not clear caption '{key}'")
            ok = False
    return ok


def clear_top_and_bottom_texts(store=None) -> bool:
    """Reset both captions before a new meme template is picked."""
    if store is None:
        from mememaker.services.text_style_store import TextStyleStore
        store = TextStyleStore()
    return clear_texts((TOP_ATTR_KEY, BOTTOM_ATTR_KEY), store.load_or_default, store.save)
