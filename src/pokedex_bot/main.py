import logging
import os

from telegram.ext import Application, ApplicationBuilder, CallbackQueryHandler, CommandHandler

from pokedex_bot.config import Settings
from pokedex_bot.handlers.pokedex import on_startup, pokedex_nav, refresh, start
from pokedex_bot.handlers.pokedex.dataset import SETTINGS_KEY
from pokedex_bot.keyboards.pokedex import CALLBACK_PATTERN
from pokedex_bot.logging_config import configure_logging


async def _on_error(update, context) -> None:
    """Global error handler: log full traceback without raising."""
    log = logging.getLogger("pokedex_bot.errors")
    err = getattr(context, "error", None)
    exc_info = (type(err), err, err.__traceback__) if err else True
    log.error("Unhandled error in update handler", exc_info=exc_info)


def build_application(settings: Settings) -> Application:
    if not settings.bot_token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not set")

    application = ApplicationBuilder().token(settings.bot_token).post_init(on_startup).build()
    application.bot_data[SETTINGS_KEY] = settings

    # Register global error handler
    application.add_error_handler(_on_error)

    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("refresh", refresh))
    application.add_handler(CallbackQueryHandler(pokedex_nav, pattern=CALLBACK_PATTERN))
    return application


def main() -> None:
    configure_logging(service_name=os.getenv("LOG_SERVICE_NAME", "bot"))
    application = build_application(Settings.from_env())
    application.run_polling()


if __name__ == "__main__":
    main()
