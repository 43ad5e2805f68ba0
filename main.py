"""主程序入口 - 交互式RPN计算器"""
import argparse
import logging
import sys

from config.config import SESSION_CONFIG, LOGGING_CONFIG, validate_config
from session import Session

logger = logging.getLogger(__name__)


def repl(session, stdin=None, stdout=None, prompt=SESSION_CONFIG["prompt"]):
    """
    读一行、处理一行，直到退出命令或输入结束
    计算错误不会终止循环
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        if prompt:
            stdout.write(prompt)
            stdout.flush()

        text = stdin.readline()
        if not text:
            logger.debug("End of input")
            break
        if session.is_exit_command(text):
            logger.debug("Exit command received")
            break

        reply = session.feed(text)
        if reply is not None:
            stdout.write(reply + "\n")

    return session.stack


def main(args):
    logging.basicConfig(
        level=args.log_level,
        format=LOGGING_CONFIG["format"]
    )
    validate_config()
    logger.info("Starting RPN calculator")

    prompt = "" if args.no_prompt else args.prompt
    session = Session()
    try:
        repl(session, prompt=prompt)
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive exact-rational RPN calculator")

    parser.add_argument(
        "--log_level",
        "--log-level",
        type=str.upper,
        default=logging.getLevelName(LOGGING_CONFIG["level"]),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level written to stderr (default: WARNING)"
    )
    parser.add_argument(
        "--prompt",
        type=str,
        default=SESSION_CONFIG["prompt"],
        help="Prompt printed before each line (default: '> ')"
    )
    parser.add_argument(
        "--no_prompt",
        "--no-prompt",
        action="store_true",
        help="Do not print a prompt, useful when input is piped"
    )
    return parser.parse_args(argv)


def run(argv=None):
    return main(parse_args(argv))


if __name__ == "__main__":
    sys.exit(run())
