import logging
import os

from battlesnake import create_battlesnake_server

DEFAULT_PORT = 3000

logger = logging.getLogger("battlesnake")


def get_port() -> int:
    """Port to listen on, from the PORT environment variable."""
    return int(os.environ.get("PORT", DEFAULT_PORT))


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    port = get_port()
    app = create_battlesnake_server()
    logger.info("🐍 Battlesnake server listening at http://127.0.0.1:%d", port)
    app.run(host='0.0.0.0', port=port)


if __name__ == "__main__":
    main()
