"""Configuration models for the email sender."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..models.email_message import DEFAULT_SENDER


class StorageConfig(BaseModel):
    """Storage configuration."""

    storage_path: str = "emails"
    file_extension: str = ".eml"
    audit_log_path: str = ""

    @field_validator("file_extension")
    def validate_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2 or "/" in v:
            raise ValueError("file_extension must look like '.eml'")
        return v

    def get_storage_path(self) -> Path:
        """Get expanded storage directory path."""
        return Path(self.storage_path).expanduser()

    def get_audit_log_path(self) -> Optional[Path]:
        """Get expanded audit log path, or None when auditing is disabled."""
        if not self.audit_log_path:
            return None
        return Path(self.audit_log_path).expanduser()


class DispatchConfig(BaseModel):
    """Mail-transfer command configuration."""

    enable_dispatch: bool = True
    command: list[str] = Field(default_factory=lambda: ["sendmail", "-t"])

    @field_validator("command")
    def validate_command(cls, v: list[str]) -> list[str]:
        if not v or not v[0]:
            raise ValueError("command must name an executable")
        return v


class MessageConfig(BaseModel):
    """Defaults applied to composed messages."""

    default_sender: str = DEFAULT_SENDER
    message_id_domain: str = "local"

    @field_validator("message_id_domain")
    def validate_domain(cls, v: str) -> str:
        if not v or any(c in v for c in "<>@ "):
            raise ValueError("message_id_domain must be a bare domain")
        return v


class AppConfig(BaseModel):
    """Main application configuration."""

    schema_version: str = "1.0"
    log_level: str = "WARNING"
    storage: StorageConfig = Field(default_factory=StorageConfig)
    dispatch: DispatchConfig = Field(default_factory=DispatchConfig)
    message: MessageConfig = Field(default_factory=MessageConfig)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level
