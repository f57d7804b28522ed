"""Process entry point — `python -m toolkit_server` or the `toolkit-server` script.

Invariants:
    - Logging configured before anything is printed or bound
    - Bind failure is fatal: logged at CRITICAL, exit status 1
"""

import logging
import sys

from toolkit_server.config import HOST, PORT, get_settings
from toolkit_server.core.errors import ServerStartupError
from toolkit_server.infrastructure.console import print_listening, print_startup_banner
from toolkit_server.infrastructure.observability import setup_logging
from toolkit_server.infrastructure.server import bind_listener, build_server, serve
from toolkit_server.main import app

logger = logging.getLogger("toolkit_server")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    print_startup_banner()
    print_listening(PORT)

    try:
        sock = bind_listener(HOST, PORT)
    except ServerStartupError as exc:
        logger.critical(exc.message, extra=exc.log_extra())
        sys.exit(1)

    logger.info(f"Listening on http://localhost:{PORT}")
    serve(build_server(app, settings, HOST, PORT), sock)


if __name__ == "__main__":
    main()
