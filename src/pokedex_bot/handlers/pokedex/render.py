import html
from typing import List, Sequence

from telegram.constants import ParseMode
from telegram.error import BadRequest

from pokedex_bot.keyboards.pokedex import build_pagination_keyboard
from pokedex_bot.models import Record
from pokedex_bot.utils.pagination import PaginationState, current_page

from .dataset import PokedexData

EMPTY_TEXT = "No pokemons."


def render_record(record: Record) -> str:
    name = html.escape(record.display_name)
    return (
        f"<b>#{record.padded_id}</b> <a href=\"{html.escape(record.sprite_url)}\">{name}</a>\n"
        f"Type: {html.escape(record.category)} <code>{html.escape(record.color)}</code>"
    )


def render_page_text(items: Sequence[Record], state: PaginationState) -> str:
    if state.is_empty or not items:
        return EMPTY_TEXT
    lines: List[str] = [f"<b>Pokedex</b> (p. {state.current_index + 1}/{state.total_pages})"]
    lines.extend(render_record(r) for r in items)
    return "\n\n".join(lines)


async def send_page(message, data: PokedexData, state: PaginationState) -> None:
    text = render_page_text(current_page(data.pages, state), state)
    await message.reply_text(text, reply_markup=build_pagination_keyboard(state), parse_mode=ParseMode.HTML)


async def edit_page(query, data: PokedexData, state: PaginationState) -> None:
    text = render_page_text(current_page(data.pages, state), state)
    try:
        await query.edit_message_text(text, reply_markup=build_pagination_keyboard(state), parse_mode=ParseMode.HTML)
    except BadRequest as e:
        if "Message is not modified" not in str(e):
            raise
