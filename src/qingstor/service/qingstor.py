from __future__ import annotations
from qingstor.config.qingstor_config import Config
from qingstor.logging_config import get_logger


logger = get_logger(__name__)

class Service:
    def __init__(self, config: Config):
        config.validate()
        self._config = config
        logger.debug(
            "QingStor service ready: host=%s port=%s protocol=%s",
            config.host,
            config.port,
            config.protocol.value,
        )

    @classmethod
    def init(cls, config: Config) -> Service:
        return cls(config)

    @property
    def config(self) -> Config:
        return self._config

    def __repr__(self) -> str:
        return (
            f"Service(host={self._config.host!r}, port={self._config.port}, "
            f"protocol={self._config.protocol.value!r})"
        )
