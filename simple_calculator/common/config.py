"""Display configuration."""
from pydantic import BaseModel, ConfigDict, Field


class DisplaySettings(BaseModel):
    """User-visible strings used to render an outcome."""

    # Read-only so that a shared instance cannot be altered by one caller
    model_config = ConfigDict(frozen=True)

    result_prefix: str = Field(default="= ", description="Prefix of a numeric result")
    invalid_input_message: str = Field(
        default="Please enter valid numbers.", description="Shown when an operand fails to parse"
    )
    division_by_zero_message: str = Field(
        default="Division by zero", description="Shown when dividing by zero"
    )


DEFAULT_SETTINGS = DisplaySettings()
