import logging

LOGGER_NAME = "dhatless"


def set_log_level(level: int) -> None:
    logging.basicConfig(format="%(levelname)s(%(funcName)s): %(message)s")
    logging.getLogger(LOGGER_NAME).setLevel(level)
