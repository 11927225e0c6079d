"""Configuration management for depdot using Pydantic models."""

import json
from enum import Enum
from fnmatch import fnmatchcase
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from depdot.graph.formatting import Color, GraphFormattingOptions, Header, Shape, Style
from depdot.graph.generator import Generator
from depdot.graph.models import ConfigurationLike, DependencyLike, ProjectLike

CONFIG_FILE_NAME = ".depdot.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


def _matches_any(value: str, patterns: list[str]) -> bool:
    return any(fnmatchcase(value, pattern) for pattern in patterns)


def _module_key(dependency: DependencyLike) -> str:
    return f"{dependency.group}:{dependency.name}"


class FormattingConfig(BaseModel):
    """Node formatting section."""
    shape: Shape | None = None
    style: Style | None = None
    color: str | None = None

    @field_validator("color")
    @classmethod
    def validate_color(cls, v):
        if v is not None:
            Color.from_hex(v)
        return v

    def to_options(self) -> GraphFormattingOptions:
        return GraphFormattingOptions(
            shape=self.shape,
            style=self.style,
            color=Color.from_hex(self.color) if self.color else None,
        )


class FormattingRule(FormattingConfig):
    """Formatting applied to dependencies whose ``group:name`` matches ``match``."""
    match: str


class HeaderConfig(BaseModel):
    """Graph header section."""
    text: str
    font_size: int = Field(alias="fontSize", default=24)
    height: int = 5
    label_location: str = Field(alias="labelLocation", default="t")
    label_justification: str = Field(alias="labelJustification", default="c")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def validate_header(self):
        self.to_header()
        return self

    def to_header(self) -> Header:
        return Header(
            text=self.text,
            font_size=self.font_size,
            height=self.height,
            label_location=self.label_location,
            label_justification=self.label_justification,
        )


class GeneratorConfig(BaseModel):
    """One generated graph: declarative filters plus formatting.

    Project and configuration patterns match names; dependency patterns
    match ``group:name``. Configuration names are matched case-insensitively.
    """
    name: str = ""
    include_projects: list[str] = Field(alias="includeProjects", default_factory=lambda: ["*"])
    exclude_projects: list[str] = Field(alias="excludeProjects", default_factory=list)
    include_configurations: list[str] = Field(alias="includeConfigurations", default_factory=lambda: ["*"])
    exclude_configurations: list[str] = Field(alias="excludeConfigurations", default_factory=lambda: ["*test*"])
    exclude_dependencies: list[str] = Field(alias="excludeDependencies", default_factory=list)
    no_children: list[str] = Field(alias="noChildren", default_factory=list)
    root_formatting: FormattingConfig = Field(alias="rootFormatting", default_factory=FormattingConfig)
    dependency_formatting: FormattingConfig = Field(
        alias="dependencyFormatting", default_factory=lambda: FormattingConfig(shape=Shape.BOX)
    )
    rules: list[FormattingRule] = Field(default_factory=list)
    header: HeaderConfig | None = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if any(char in v for char in "/\\"):
            raise ValueError(f"generator name must not contain path separators, got: {v}")
        return v

    def to_generator(self) -> Generator:
        """Build the predicate-based generator described by this section."""
        include_configurations = [pattern.lower() for pattern in self.include_configurations]
        exclude_configurations = [pattern.lower() for pattern in self.exclude_configurations]
        rules = [(rule.match, rule.to_options()) for rule in self.rules]

        def include_project(project: ProjectLike) -> bool:
            return _matches_any(project.name, self.include_projects) and not _matches_any(
                project.name, self.exclude_projects
            )

        def include_configuration(configuration: ConfigurationLike) -> bool:
            name = configuration.name.lower()
            return _matches_any(name, include_configurations) and not _matches_any(name, exclude_configurations)

        def include(dependency: DependencyLike) -> bool:
            return not _matches_any(_module_key(dependency), self.exclude_dependencies)

        def children(dependency: DependencyLike) -> bool:
            return not _matches_any(_module_key(dependency), self.no_children)

        def dependency_formatting(dependency: DependencyLike) -> GraphFormattingOptions | None:
            key = _module_key(dependency)
            for pattern, options in rules:
                if fnmatchcase(key, pattern):
                    return options
            return None

        return Generator(
            name=self.name,
            include=include,
            children=children,
            include_project=include_project,
            include_configuration=include_configuration,
            dependency_formatting=dependency_formatting,
            root_formatting=self.root_formatting.to_options(),
            default_formatting=self.dependency_formatting.to_options(),
            header=self.header.to_header() if self.header else None,
        )


class OutputConfig(BaseModel):
    """Output configuration section."""
    dir: str = "build/reports/dependency-graph"


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(use_enum_values=True)


class DepdotConfig(BaseModel):
    """Complete depdot configuration model."""
    generators: list[GeneratorConfig] = Field(default_factory=lambda: [GeneratorConfig()])
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    @field_validator("generators")
    @classmethod
    def validate_unique_generator_names(cls, v):
        if not v:
            raise ValueError("at least one generator must be configured")
        names = [generator.name for generator in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"generator names must be unique, duplicated: {duplicates}")
        return v

    def get_generator(self, name: str) -> GeneratorConfig:
        for generator in self.generators:
            if generator.name == name:
                return generator
        available = [generator.name or "<default>" for generator in self.generators]
        raise ValueError(f"Unknown generator '{name}'. Available: {available}")


def load_config(config_path: str | Path | None = None) -> DepdotConfig:
    """Load ``.depdot.json``, or the default single generator when there is none.

    Without an explicit path the file is looked up from the working
    directory upwards. Unreadable JSON and invalid settings raise
    ``ValueError`` naming the file.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None or not path.exists():
        return DepdotConfig()

    try:
        return DepdotConfig(**json.loads(path.read_text(encoding="utf-8")))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}")
    except ValidationError as e:
        raise ValueError(f"Failed to load config from {path}: {e}")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    start = Path(start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        if (directory / CONFIG_FILE_NAME).exists():
            return directory / CONFIG_FILE_NAME
    return None
