"""
Configuration for the schema compiler and the command line tool.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_MAX_DEPTH = 100


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        indent: JSON indentation of the written document
        atomic_write: Whether to use atomic file writes
        check_schema: Whether to check the document against the draft-06 meta-schema
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    indent: int = 2
    atomic_write: bool = True
    check_schema: bool = False


@dataclass
class CompilerOptions:
    """Options for a single compilation."""

    # Add the "$schema" marker to the top-level document
    root: bool = False

    # Drop predicates missing from the predicate table instead of failing
    loose: bool = False

    # Deepest AST nesting accepted before giving up
    max_depth: int = DEFAULT_MAX_DEPTH

    # Output configuration (used by the command line tool)
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CompilerOptions:
        """Create options from a dictionary."""
        options = CompilerOptions()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                options.output = OutputConfig(
                    mode=mode,
                    indent=v.get("indent", 2),
                    atomic_write=v.get("atomic_write", True),
                    check_schema=v.get("check_schema", False),
                )
            elif hasattr(options, k):
                setattr(options, k, v)
        return options

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return {
            "root": self.root,
            "loose": self.loose,
            "max_depth": self.max_depth,
            "output": {
                "mode": self.output.mode.value,
                "indent": self.output.indent,
                "atomic_write": self.output.atomic_write,
                "check_schema": self.output.check_schema,
            },
        }
