"""Pydantic models describing the database configuration document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

_BOOL_SPELLINGS = {"true": "true", "false": "false"}


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class OptimizationSettings(_CamelModel):
    """Optional per-entry query behaviour hints."""

    auto_to_lower: StrictStr | None = Field(default=None, alias="autoToLower")
    enable_i_like: StrictStr | None = Field(default=None, alias="enableILike")
    identity_strategy: StrictStr | None = Field(default=None, alias="identityStrategy")

    def normalized(self) -> OptimizationSettings:
        """Return a copy with boolean spellings folded and strings trimmed."""

        identity = self.identity_strategy.strip() if self.identity_strategy is not None else None
        return self.model_copy(
            update={
                "auto_to_lower": normalize_bool_string(self.auto_to_lower),
                "enable_i_like": normalize_bool_string(self.enable_i_like),
                "identity_strategy": identity or None,
            }
        )


class DatabaseEntry(_CamelModel):
    """One named database connection profile."""

    name: StrictStr
    connection_string: StrictStr = Field(alias="connectionString")
    db_type: StrictStr = Field(alias="dbType")
    description: StrictStr | None = None
    is_default: StrictBool | None = Field(default=None, alias="isDefault")
    optimization_settings: OptimizationSettings | None = Field(default=None, alias="optimizationSettings")

    def normalized(self) -> DatabaseEntry:
        """Return a copy with every string field trimmed."""

        optimization = self.optimization_settings.normalized() if self.optimization_settings else None
        return self.model_copy(
            update={
                "name": self.name.strip(),
                "connection_string": self.connection_string.strip(),
                "db_type": self.db_type.strip(),
                "description": self.description.strip() if self.description is not None else None,
                "optimization_settings": optimization,
            }
        )

    def to_payload(self) -> dict[str, object]:
        """JSON-shaped dict with camelCase keys and absent fields dropped."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ConfigDocument(BaseModel):
    """Root of the persisted configuration file."""

    databases: list[DatabaseEntry]

    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.databases)

    def find(self, name: str) -> DatabaseEntry | None:
        for entry in self.databases:
            if entry.name == name:
                return entry
        return None

    def with_entry(self, entry: DatabaseEntry) -> ConfigDocument:
        """Return a copy with `entry` replacing its namesake in place, or appended."""

        databases = list(self.databases)
        for index, existing in enumerate(databases):
            if existing.name == entry.name:
                databases[index] = entry
                break
        else:
            databases.append(entry)
        return self.model_copy(update={"databases": databases})

    def without(self, name: str) -> ConfigDocument:
        """Return a copy with every entry named exactly `name` removed."""

        databases = [entry for entry in self.databases if entry.name != name]
        return self.model_copy(update={"databases": databases})

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def normalize_bool_string(value: str | None) -> str | None:
    """Fold case-insensitive `true`/`false` to lowercase; trim anything else."""

    if value is None:
        return None
    trimmed = value.strip()
    return _BOOL_SPELLINGS.get(trimmed.lower(), trimmed)


__all__ = [
    "ConfigDocument",
    "DatabaseEntry",
    "OptimizationSettings",
    "normalize_bool_string",
]
