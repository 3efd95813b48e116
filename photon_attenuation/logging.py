import logging
from rich.logging import RichHandler


def setup_log(level: int = logging.INFO) -> logging.Logger:
    log = logging.getLogger("photon_attenuation")
    log.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(level=logging.NOTSET))
    return log
