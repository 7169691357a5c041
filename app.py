import logging
import os
import sys

from scout_browser.config import load_configuration
from scout_browser.context import build_context
from scout_browser.core.exceptions import ScoutBrowserError
from scout_browser.logging_config import configure_logging
from scout_browser.shell import run_shell

logger = logging.getLogger(__name__)


def main() -> int:
    debug = os.getenv("DEBUG", "0") == "1"
    configure_logging(level=logging.DEBUG if debug else logging.INFO)

    config_path = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        config = load_configuration(config_path)
        context = build_context(config)
    except ScoutBrowserError as e:
        logger.error("Initialization failed", extra={"error": str(e)})
        print(f"Initialization failed: {e}", file=sys.stderr)
        return 1

    run_shell(context)
    return 0


if __name__ == "__main__":
    sys.exit(main())
