"""Per-invocation generator options."""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from .settings import Settings


class GeneratorOptions(BaseModel):
    """Options for one generator run, after merging CLI switches over settings."""

    model_config = ConfigDict(frozen=True)

    migration: bool = True
    binary_id: bool = False
    instructions: Optional[str] = None


def merge_options(
    settings: Settings,
    migration: Optional[bool] = None,
    binary_id: Optional[bool] = None,
    instructions: Optional[str] = None,
) -> GeneratorOptions:
    """
    Merge CLI-supplied switches over the configured defaults.

    A switch left as None keeps the value from settings.

    Args:
        settings: Configured generator defaults
        migration: --migration/--no-migration
        binary_id: --binary-id/--no-binary-id
        instructions: Extra text printed after generation

    Returns:
        GeneratorOptions for this run
    """
    return GeneratorOptions(
        migration=settings.migration if migration is None else migration,
        binary_id=settings.binary_id if binary_id is None else binary_id,
        instructions=instructions,
    )
