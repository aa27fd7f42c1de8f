from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from qingstor.config.models import ConfigDocument, Protocol
from qingstor.errors import ConfigDeserializationError, ConfigIOError, MissingFieldError
from qingstor.logging_config import get_logger


logger = get_logger(__name__)

REQUIRED_FIELDS = ("access_key_id", "secret_access_key", "host")
TEXT_FIELDS = ("access_key_id", "secret_access_key", "host", "additional_user_agent", "log_level")

# Plain scalars PyYAML would turn into numbers or booleans; text fields keep them as written.
_RESOLVED_SCALAR_TAGS = {
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:bool",
}


def _parse_yaml(content: str) -> Any:
    loader = yaml.SafeLoader(content)
    try:
        node = loader.get_single_node()
        if node is None:
            return None
        document = loader.construct_document(node)
    finally:
        loader.dispose()

    if isinstance(node, yaml.MappingNode) and isinstance(document, dict):
        for key_node, value_node in node.value:
            if (
                isinstance(key_node, yaml.ScalarNode)
                and key_node.value in TEXT_FIELDS
                and isinstance(value_node, yaml.ScalarNode)
                and value_node.tag in _RESOLVED_SCALAR_TAGS
            ):
                document[key_node.value] = value_node.value
    return document


@dataclass
class Config:
    access_key_id: str = ""
    secret_access_key: str = ""

    host: str = "qingstor.com"
    port: int = 0

    connection_retries: int = 3
    additional_user_agent: str = ""
    log_level: str = "INFO"

    protocol: Protocol = Protocol.HTTPS

    @classmethod
    def new(cls, access_key_id: str, secret_access_key: str) -> Config:
        return cls(access_key_id=access_key_id, secret_access_key=secret_access_key)

    @classmethod
    def load_from_file(cls, path: str | Path) -> Config:
        config_path = Path(path)
        try:
            content = config_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConfigDeserializationError(f"Config file '{config_path}' is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigIOError(f"Error reading config file '{config_path}': {e}") from e
        config = cls.load_from_str(content)
        logger.debug("Loaded QingStor config: path=%s host=%s", config_path, config.host)
        return config

    @classmethod
    def load_from_str(cls, content: str) -> Config:
        """
        Parse a YAML document into a Config.
        Keys missing from the document keep their defaults; unknown keys are ignored.
        Text fields take plain scalars verbatim, so `access_key_id: 0123` stays "0123".
        Raises ConfigDeserializationError on malformed YAML or mistyped values.
        """
        try:
            raw = _parse_yaml(content)
        except yaml.YAMLError as e:
            raise ConfigDeserializationError(f"Config is not valid YAML: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigDeserializationError(
                f"Config must be a YAML mapping, got {type(raw).__name__}."
            )

        try:
            document = ConfigDocument.model_validate(raw)
        except ValidationError as e:
            raise ConfigDeserializationError(f"Config has invalid fields: {e}") from e
        return cls(**document.model_dump())

    def validate(self) -> None:
        """
        Check the required fields in order and stop at the first empty one.
        On success the port is always reset from the protocol (80 or 443).
        """
        for field in REQUIRED_FIELDS:
            if not getattr(self, field):
                raise MissingFieldError(field)
        self.port = self.protocol.default_port
