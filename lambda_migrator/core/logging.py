import logging
import sys


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional stage and function fields."""
    def format(self, record):
        # Add default values for stage and function if not present
        if not hasattr(record, 'stage'):
            record.stage = '-'
        if not hasattr(record, 'function'):
            record.function = '-'
        return super().format(record)


def configure_logging(level: int = logging.INFO) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [stage=%(stage)s function=%(function)s] - %(message)s"
    ))
    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )
