import logging

LOG_FORMAT = "{asctime} {levelname} {name} {message}"


def get_logger(name: str) -> logging.Logger:
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        style="{",
    )
    return logging.getLogger(name)


def set_verbosity(verbose: bool) -> None:
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)
