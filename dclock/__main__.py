import argparse
import logging
import sys
from dclock.common.logger import log, get_logger
from dclock.ui.app import main

# Entry point for `python -m dclock` and the `dclock` console script
def run() -> None:
    parser = argparse.ArgumentParser(prog="dclock", description="Digital clock with a focus timer.")
    parser.add_argument("--debug", action="store_true", help="also log DEBUG output to the console")
    args, qt_args = parser.parse_known_args()
    if args.debug:
        get_logger(level=logging.DEBUG, console=True)

    log.info("=== INITIALIZED NEW SESSION ===")
    try:
        main([sys.argv[0], *qt_args])
    except SystemExit:
        raise
    except Exception:
        # Full stack trace, always
        log.exception("Uncaught exception in entrypoint, exiting")
        sys.exit(1)

if __name__ == "__main__":
    run()
