from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(UTC)


class CamelModel(BaseModel):
    """Base model accepting both snake_case and the editor's camelCase keys.

    Dump with ``by_alias=True`` to get the camelCase names the rendering
    layer consumes.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
