"""JSON serialization helpers shared by the output models."""

import json
from typing import Any


def round_floats(obj: Any, decimals: int = 2) -> Any:
    """Round every float found in nested dicts, lists and tuples.

    Percentages recovered from OCR text rarely carry more than one decimal,
    but values such as merged shares can; two decimals keep output stable.

    Args:
        obj: Value to round; containers are copied, other values returned as is
        decimals: Number of decimal places (default: 2)

    Returns:
        A copy of obj with rounded floats
    """
    if isinstance(obj, float):
        return round(obj, decimals)
    if isinstance(obj, dict):
        return {key: round_floats(value, decimals) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return type(obj)(round_floats(item, decimals) for item in obj)
    return obj


class SerializationMixin:
    """Give a Pydantic model ``to_dict()`` and ``to_json()`` with output defaults.

    The defaults are camelCase aliases, no ``null`` values, JSON-compatible
    types and floats rounded to 2 decimals. Mix in before ``BaseModel``:

        class Share(SerializationMixin, BaseModel):
            name: str
            percentage: float

        Share(name="Reels", percentage=33.333).to_json(indent=None)
        # '{"name": "Reels", "percentage": 33.33}'
    """

    def to_dict(self, **kwargs: Any) -> dict:
        """Dump to a plain dict; keyword arguments override model_dump defaults."""
        options: dict[str, Any] = {
            "by_alias": True,
            "exclude_none": True,
            "mode": "json",
            **kwargs,
        }
        return round_floats(self.model_dump(**options))  # type: ignore[attr-defined]

    def to_json(self, *, indent: str | int | None = "\t", **kwargs: Any) -> str:
        """Dump to a JSON string.

        Args:
            indent: Indentation passed to json.dumps (default: tab). None gives
                compact output.
            **kwargs: Overrides for model_dump, as in to_dict()
        """
        return json.dumps(self.to_dict(**kwargs), indent=indent)
