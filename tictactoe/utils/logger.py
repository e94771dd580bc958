import logging

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
}


class ColoredMessageFormatter(logging.Formatter):
    """Prefix records with the logger name and color the message by level."""

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = f"[{record.name}] {record.getMessage()}"
        color = LEVEL_COLORS.get(record.levelno, "") if self.use_color else ""
        if not color:
            return message
        return f"{color}{message}{RESET}"


def setup_logging(
    name: str = "tictactoe", level: int = logging.INFO, use_color: bool = True
) -> logging.Logger:
    """Attach a stream handler to the ``name`` logger and set its level."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid stacking handlers on repeated calls.
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ColoredMessageFormatter(use_color=use_color))
        logger.addHandler(handler)

    return logger
