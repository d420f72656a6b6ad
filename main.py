import argparse
import sys
from typing import List, Optional

from loguru import logger

from clients import create_client, Client
from config import load_configuration, REQUIRED_TOOLS
from errors import AICommitError
from git_repo import GitDiffSource
from message_generation import MessageGenerator
from preflight import check_api_key, check_required_tools

NO_DIFF_MESSAGE = "No differences detected. No commit message to generate."


def configure_logging(verbose: bool = False):
    """Sends log output to stderr so stdout only carries the commit message."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format="<level>{message}</level>")


def positive_timeout(value: str) -> float:
    try:
        timeout = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be a number of seconds, got {value!r}")
    if timeout <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return timeout


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a commit message for pending changes using an LLM.")
    parser.add_argument("repo_path", nargs="?", default=".", help="Path inside the Git repository.")
    parser.add_argument("-m", "--model", default=None, help="Chat model to use (default: $OPENAI_MODEL or gpt-4).")
    parser.add_argument("-s", "--staged", action="store_true", help="Only describe staged changes.")
    parser.add_argument("-t", "--timeout", type=positive_timeout, default=None, help="Network timeout in seconds.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log the diff, the request and the raw response.")
    return parser.parse_args(argv)


def generate(args: argparse.Namespace, client: Optional[Client] = None, diff_source=None) -> Optional[str]:
    """Runs the pipeline. Returns None when there is nothing to describe."""
    check_required_tools(REQUIRED_TOOLS)

    config = load_configuration()
    config['OPENAI_API_KEY'] = check_api_key(config)
    if args.timeout is not None:
        config['OPENAI_TIMEOUT'] = args.timeout

    # 1. Get the Diff
    if diff_source is None:
        diff_source = GitDiffSource(args.repo_path, staged_only=args.staged)
    diff = diff_source.get_pending_diff()
    if not diff:
        return None
    logger.info("Differences detected.")
    logger.debug(f"Git diff:\n{diff}")

    # 2. Ask the model
    if client is None:
        client = create_client("openai", config)
    generator = MessageGenerator(client, model=args.model or config['OPENAI_MODEL'])
    return generator.generate_commit_message(diff)


def main(argv: Optional[List[str]] = None, client: Optional[Client] = None, diff_source=None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    logger.info("Script started.")

    try:
        commit_message = generate(args, client=client, diff_source=diff_source)
    except AICommitError as e:
        logger.error(e.message)
        if e.hint:
            logger.error(e.hint)
        return 1

    if commit_message is None:
        logger.info(NO_DIFF_MESSAGE)
        return 0

    print("Generated commit message:")
    print(commit_message)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
