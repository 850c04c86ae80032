import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for command-line runs.
    - Timestamped format with logger name and line number.
    - Everything goes to stderr so stdout stays free for the output path.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,  # drop handlers left over from earlier calls
    )

    # Pillow is chatty at DEBUG (plugin imports, PNG chunks)
    logging.getLogger("PIL").setLevel(logging.WARNING)
