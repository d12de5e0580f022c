"""Command dispatch for the action: `testgen-action [post-tests|apply-tests]`."""
import argparse
import logging
import sys
from typing import List, Mapping, Optional

from ._logging import configure_cli_logging
from .apply_tests import apply_tests
from .config import ActionConfig
from .errors import ConfigError
from .post_tests import post_test_results

log = logging.getLogger(__name__)

ACTIONS = ("post-tests", "apply-tests")


def run(config: ActionConfig) -> None:
    """Run the configured action; raises on any failure."""
    if config.action == "post-tests":
        post_test_results(config)
    elif config.action == "apply-tests":
        summary = apply_tests(config)
        if not summary.ok:
            failed = ", ".join(summary.failed)
            raise RuntimeError(f"Failed to apply patches for: {failed}")
    else:
        raise ConfigError(f"Unknown action: {config.action}")


def _set_failed(message: str) -> None:
    # Workflow command understood by the Actions runner.
    print(f"::error::{message}", flush=True)


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="testgen-action",
        description="Post generated tests as PR comments, or apply the accepted ones.",
    )
    parser.add_argument(
        "action",
        nargs="?",
        help=f"one of {', '.join(ACTIONS)}; defaults to the 'action' input",
    )
    parser.add_argument("--workspace", help="override GITHUB_WORKSPACE")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    args = parser.parse_args(argv)

    try:
        config = ActionConfig.from_env(environ)
        if args.action:
            config.action = args.action
        if args.workspace:
            config.workspace = args.workspace
        config.debug = config.debug or args.debug
        configure_cli_logging(config.debug)
        run(config)
    except Exception as e:
        log.debug("action failed", exc_info=True)
        _set_failed(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
