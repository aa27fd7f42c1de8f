from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Protocol(str, Enum):
    HTTP = "http"
    HTTPS = "https"

    @property
    def default_port(self) -> int:
        return 80 if self is Protocol.HTTP else 443


# Shape of a QingStor config YAML document. Every key is optional and
# falls back to the same default as Config.
class ConfigDocument(BaseModel):
    model_config = ConfigDict(extra='ignore')

    access_key_id: str = Field("", description="Access key ID issued by QingStor.")
    secret_access_key: str = Field("", description="Secret access key paired with access_key_id.")
    host: str = Field("qingstor.com", description="API endpoint host.")
    port: int = Field(
        0, ge=0, le=65535, strict=True, description="Replaced by the protocol's port on validation."
    )
    connection_retries: int = Field(3, strict=True, description="Retries per request.")
    additional_user_agent: str = Field("", description="Appended to the SDK User-Agent header.")
    log_level: str = Field("INFO", description="Level name for the application's logging setup.")
    protocol: Protocol = Field(Protocol.HTTPS, description="Either 'http' or 'https'.")
