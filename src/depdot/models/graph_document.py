"""Models for the resolved dependency graph JSON document."""

from pydantic import BaseModel, Field, field_validator


def split_coordinate(coordinate: str) -> tuple[str, str, str]:
    """Split ``group:name[:version]`` into its three parts."""
    parts = coordinate.split(":")
    if len(parts) == 2:
        return parts[0], parts[1], ""
    if len(parts) == 3:
        return parts[0], parts[1], parts[2]
    raise ValueError(f"Coordinate must be group:name[:version], got: {coordinate!r}")


class ModuleEntry(BaseModel):
    """A resolved module and the coordinates of its direct dependencies."""
    group: str
    name: str
    version: str = ""
    label: str | None = None
    dependencies: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"

    @field_validator("dependencies")
    @classmethod
    def validate_dependencies(cls, v):
        for coordinate in v:
            split_coordinate(coordinate)
        return v


class ConfigurationEntry(BaseModel):
    """A named dependency scope listing its root coordinates in order."""
    name: str
    dependencies: list[str] = Field(default_factory=list)

    @field_validator("dependencies")
    @classmethod
    def validate_dependencies(cls, v):
        for coordinate in v:
            split_coordinate(coordinate)
        return v


class ProjectEntry(BaseModel):
    """A project with its ordered configurations."""
    name: str
    group: str | None = None
    configurations: list[ConfigurationEntry] = Field(default_factory=list)


class GraphDocument(BaseModel):
    """Complete resolved dependency graph document."""
    schema_version: str = Field(alias="schemaVersion", default="1.0.0")
    projects: list[ProjectEntry] = Field(default_factory=list)
    modules: list[ModuleEntry] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator("modules")
    @classmethod
    def validate_unique_modules(cls, v):
        seen = set()
        for module in v:
            if module.coordinate in seen:
                raise ValueError(f"Duplicate module coordinate: {module.coordinate}")
            seen.add(module.coordinate)
        return v
