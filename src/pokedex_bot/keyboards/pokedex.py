import logging
from dataclasses import dataclass
from typing import List, Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from pokedex_bot.utils.pagination import NavCommand, PaginationState

logger = logging.getLogger(__name__)

CALLBACK_PREFIX = "pokedex"
CALLBACK_NOOP = f"{CALLBACK_PREFIX}:noop"
# pokedex:<shown index>:(page:<target>|next|prev); the shown index pins each message to its own page
CALLBACK_PATTERN = rf"^{CALLBACK_PREFIX}:(noop|\d+:(page:\d+|next|prev))$"
PAGE_BUTTONS_PER_ROW = 8


@dataclass(frozen=True)
class NavCallback:
    origin_index: int
    command: NavCommand


def page_callback(origin_index: int, index: int) -> str:
    return f"{CALLBACK_PREFIX}:{origin_index}:page:{index}"


def step_callback(origin_index: int, direction: str) -> str:
    return f"{CALLBACK_PREFIX}:{origin_index}:{direction}"


def parse_nav_callback(data: Optional[str]) -> Optional[NavCallback]:
    """Map callback data to the shown page index and a command; ``None`` for noop or junk."""
    parts = (data or "").split(":")
    if len(parts) < 3 or parts[0] != CALLBACK_PREFIX:
        return None
    try:
        origin = int(parts[1])
        if parts[2] == "next" and len(parts) == 3:
            return NavCallback(origin, NavCommand.next())
        if parts[2] == "prev" and len(parts) == 3:
            return NavCallback(origin, NavCommand.prev())
        if parts[2] == "page" and len(parts) == 4:
            return NavCallback(origin, NavCommand.go_to(int(parts[3])))
    except ValueError:
        logger.warning("Invalid page index in callback", extra={"callback": data})
    return None


def build_pagination_keyboard(state: PaginationState) -> Optional[InlineKeyboardMarkup]:
    if state.is_empty:
        return None
    shown = state.current_index
    rows: List[List[InlineKeyboardButton]] = []
    buttons = [
        InlineKeyboardButton(
            ("✅ " if idx == shown else "") + str(idx + 1),
            callback_data=page_callback(shown, idx),
        )
        for idx in range(state.total_pages)
    ]
    while buttons:
        rows.append(buttons[:PAGE_BUTTONS_PER_ROW])
        buttons = buttons[PAGE_BUTTONS_PER_ROW:]
    # Disabled directions stay visible but do nothing
    prev_btn = InlineKeyboardButton(
        "⬅️ Prev" if state.has_prev else "· Prev",
        callback_data=step_callback(shown, "prev") if state.has_prev else CALLBACK_NOOP,
    )
    next_btn = InlineKeyboardButton(
        "Next ➡️" if state.has_next else "Next ·",
        callback_data=step_callback(shown, "next") if state.has_next else CALLBACK_NOOP,
    )
    rows.append([prev_btn, next_btn])
    return InlineKeyboardMarkup(rows)
