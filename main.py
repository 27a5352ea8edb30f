"""
Main entry point for the food ordering bot

    python main.py            # webhook server
    python main.py console    # chat simulator in the terminal
"""
import sys

from logging_config import setup_logging


def run_server():
    # webhook server; a missing bot token stops startup here
    from app import create_app
    from config import load_settings, ConfigurationError

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.log_level)
    app = create_app(settings=settings)

    print("=== Food Ordering Bot Server ===")
    print(f"Starting server on http://localhost:{settings.port}")
    print("Telegram webhook path: /webhook/<TELEGRAM_BOT_TOKEN>")
    print("Press Ctrl+C to stop")

    app.run(host='0.0.0.0', port=settings.port, debug=settings.debug)


def run_console():
    from core.order_bot import FoodOrderBot
    from ui.console_ui import ConsoleChatUI

    setup_logging("WARNING")
    ConsoleChatUI(FoodOrderBot()).run()


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    mode = args[0] if args else "server"

    if mode == "server":
        run_server()
    elif mode == "console":
        run_console()
    else:
        print(f"Unknown mode '{mode}'. Use 'server' or 'console'.", file=sys.stderr)
        sys.exit(2)


if __name__ == '__main__':
    main()
