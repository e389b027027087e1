from typing import Any, Iterable


def reject_nulls(data: Any, fields: Iterable[str]) -> Any:
    """Refuse explicit nulls for columns that are NOT NULL in the database.

    Used from model_validator(mode="before"), so omitted fields still fall
    back to their defaults and only a literal null is rejected.
    """
    if isinstance(data, dict):
        nulls = [field for field in fields if field in data and data[field] is None]
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
    return data
