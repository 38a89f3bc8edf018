import logging

from telegram import Update
from telegram.ext import ContextTypes

from pokedex_bot.keyboards.pokedex import CALLBACK_NOOP, parse_nav_callback
from pokedex_bot.notifications import Severity, show_notification
from pokedex_bot.utils.pagination import PaginationState, reduce

from .dataset import BOT_DATA_KEY, PokedexData, get_dataset, get_settings, load_pokedex
from .render import edit_page, send_page

logger = logging.getLogger(__name__)

LOAD_FAILED_TEXT = "Something went wrong while loading the pokedex, try /refresh later."


def _shown_state(data: PokedexData, origin_index: int) -> PaginationState:
    """State of the message the button belongs to, checked against the current dataset."""
    state = PaginationState.initial(len(data.pages))
    if 0 <= origin_index < state.total_pages:
        return PaginationState(total_pages=state.total_pages, current_index=origin_index)
    # Dataset shrank after /refresh; treat the message as showing the first page
    return state


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    chat_id = update.effective_chat.id if update.effective_chat else None
    user_id = update.effective_user.id if update.effective_user else None
    logger.info("Start command received", extra={"correlation_id": chat_id, "user_id": user_id})
    data = get_dataset(context.bot_data)
    if data.failed:
        await show_notification(update.message, Severity.DANGER, LOAD_FAILED_TEXT)
        return
    await send_page(update.message, data, PaginationState.initial(len(data.pages)))


async def refresh(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    chat_id = update.effective_chat.id if update.effective_chat else None
    logger.info("Refresh requested", extra={"correlation_id": chat_id})
    data = await load_pokedex(get_settings(context.bot_data))
    if data.failed:
        await show_notification(update.message, Severity.DANGER, LOAD_FAILED_TEXT)
        return
    context.bot_data[BOT_DATA_KEY] = data
    await send_page(update.message, data, PaginationState.initial(len(data.pages)))


async def pokedex_nav(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.callback_query
    await query.answer()
    chat_id = query.message.chat_id if query and query.message else None
    if query.data == CALLBACK_NOOP:
        return
    nav = parse_nav_callback(query.data)
    if nav is None:
        logger.warning("Unrecognized pokedex callback", extra={"correlation_id": chat_id, "callback": query.data})
        return
    data = get_dataset(context.bot_data)
    state = _shown_state(data, nav.origin_index)
    new_state = reduce(state, nav.command)
    logger.info(
        "Pokedex navigation",
        extra={
            "correlation_id": chat_id,
            "action": nav.command.action.value,
            "from_index": state.current_index,
            "to_index": new_state.current_index,
        },
    )
    if new_state == state and nav.origin_index == state.current_index:
        return
    await edit_page(query, data, new_state)
