import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)


class LoggingMixin:
    @property
    def logger(self) -> logging.Logger:
        if not hasattr(self, '_logger'):
            # one logger per class, named after it
            self._logger = logging.getLogger(self.__class__.__name__)
        return self._logger
