"""Signal configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field


if TYPE_CHECKING:
    from minisignals.signals.core import Signal


class SignalConfig(BaseModel):
    """Signal configuration.

    Example:
        config = SignalConfig(name="saved", memorize=True)
        saved = config.create_signal()
    """

    name: str | None = Field(
        default=None,
        title="Signal Name",
        examples=["saved", "user_login"],
    )
    """Label used in the signal repr and in log messages."""

    memorize: bool = Field(default=False, title="Memorize Dispatch")
    """Remember the last dispatched arguments and replay them to new listeners."""

    enabled: bool = Field(default=True, title="Initially Enabled")
    """Whether the signal dispatches right after creation."""

    model_config = ConfigDict(use_attribute_docstrings=True, extra="forbid")

    def create_signal(self) -> Signal:
        """Create a signal configured by this model."""
        from minisignals.signals.core import Signal

        return Signal(config=self)
