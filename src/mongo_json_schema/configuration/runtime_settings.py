"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ModelTarget:
    """One typed schema exported as a collection validator."""

    target: str
    collection: str
    validation_level: str
    validation_action: str


@dataclass(frozen=True)
class OutputSettings:
    """Rendering options for exported documents."""

    output_format: str
    indent: int
    mode: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    models: tuple[ModelTarget, ...]
    output: OutputSettings
