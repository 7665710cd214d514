"""paneclose command line.

Subcommands:
- run (default): Show the prompt in the current terminal
- popup: Show the prompt in a tmux popup
- bind <key>: Bind a tmux key to the popup

Remaining key=value arguments override paneclose.toml options.
"""

import logging
import sys

from .config import get_config_manager, parse_overrides
from .tmux import TmuxError, TmuxSnapshotSource, check_tmux_available, get_own_pane

logger = logging.getLogger(__name__)


def _setup_logging(log_file) -> None:
    logging.basicConfig(
        filename=log_file,
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def _handle_run(args: list[str]) -> None:
    """Run the prompt app in this terminal."""
    from .ui import ConfirmApp

    config = get_config_manager(parse_overrides(args))
    _setup_logging(config.log_file)

    if not check_tmux_available():
        print("Error: tmux is not running")
        sys.exit(1)

    own_pane = get_own_pane()
    if own_pane is not None:
        logger.warning(f"Running inside pane %{own_pane}, not a popup: confirming may close paneclose itself")

    logger.info(f"Starting: variant={config.variant} config={config.config_file}")
    app = ConfirmApp(
        TmuxSnapshotSource(),
        bindings=config.bindings,
        variant=config.variant,
        poll_interval=config.poll_interval,
        own_pane=own_pane,
    )
    app.run()


def _handle_popup(args: list[str]) -> None:
    """Open the prompt in a tmux popup."""
    from .ui import show_popup

    try:
        show_popup(args)
    except TmuxError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _handle_bind(args: list[str]) -> None:
    """Bind a tmux key to the popup."""
    from .ui import install_binding

    if not args:
        print("Usage: paneclose bind <key> [key=value ...]")
        sys.exit(1)

    try:
        install_binding(args[0], args[1:])
    except TmuxError as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Bound prefix + {args[0]} to paneclose")


CLI_SUBCOMMANDS = {
    "run": _handle_run,
    "popup": _handle_popup,
    "bind": _handle_bind,
}


def main():
    """Dispatch to a subcommand, defaulting to run."""
    args = sys.argv[1:]
    if args and args[0] in CLI_SUBCOMMANDS:
        CLI_SUBCOMMANDS[args[0]](args[1:])
    else:
        _handle_run(args)


if __name__ == "__main__":
    main()
