"""
Configuration presets for pymatrix.

Options are frozen dataclasses passed explicitly as keyword arguments.
Module-level presets name the defaults.
"""

from dataclasses import dataclass

from pymatrix.core.exceptions import ValidationError


@dataclass(frozen=True)
class DisplayOptions:
    """Text layout used by Matrix.format() and Matrix.display()."""
    width: int = 4

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValidationError(
                f"width: expected int, got {type(self.width).__name__}"
            )
        if self.width < 1:
            raise ValidationError(f"width: must be positive, got {self.width}")


# Fixed-width integer grid, four characters per field
DEFAULT_DISPLAY = DisplayOptions(width=4)
