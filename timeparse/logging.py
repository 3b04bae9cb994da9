import logging


def setup_logging(debug: bool = False):
    """Configure logging for the application.

    Messages go to stderr so stdout only carries the conversion result.

    Args:
        debug: If True, trace how the input was interpreted.
    """
    log_level = logging.DEBUG if debug else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="[%(asctime)s] [%(levelname)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler()],
    )
