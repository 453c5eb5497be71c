"""
Configuration for polygon triangulation.

Defines ear selection order, winding handling and validation tolerance.
"""

from dataclasses import dataclass
import json
from pathlib import Path


# Accepted values for TriangulationConfig.ear_order
EAR_ORDERS = ("area", "index")


@dataclass
class TriangulationConfig:
    """
    Configuration for ear clipping triangulation.

    Attributes:
        ear_order: Which ear to clip first. "area" takes the largest ear
            (smallest vertex id on ties), "index" the smallest vertex id.
        auto_orient: Walk clockwise input in reverse so the ring is CCW.
            Triangle indices still refer to the input order.
        area_tolerance: Relative tolerance when comparing the triangle area
            sum to the polygon area during validation
    """
    ear_order: str = "area"
    auto_orient: bool = True
    area_tolerance: float = 1e-9

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.ear_order not in EAR_ORDERS:
            errors.append(f"ear_order must be one of {', '.join(EAR_ORDERS)}, got {self.ear_order!r}")

        if self.area_tolerance < 0:
            errors.append(f"area_tolerance cannot be negative, got {self.area_tolerance}")
        if self.area_tolerance > 0.1:
            errors.append(f"area_tolerance {self.area_tolerance} is excessive (max recommended: 0.1)")

        return errors

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "ear_order": self.ear_order,
            "auto_orient": self.auto_orient,
            "area_tolerance": self.area_tolerance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TriangulationConfig":
        """Create from dictionary."""
        return cls(
            ear_order=data.get("ear_order", "area"),
            auto_orient=data.get("auto_orient", True),
            area_tolerance=data.get("area_tolerance", 1e-9),
        )

    def save(self, filepath: Path | str) -> None:
        """Save configuration to JSON file."""
        filepath = Path(filepath)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path | str) -> "TriangulationConfig":
        """Load configuration from JSON file."""
        filepath = Path(filepath)
        if not filepath.exists():
            return cls()  # Return defaults if file doesn't exist

        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def load_for_polygon(cls, polygon_filepath: Path | str) -> "TriangulationConfig":
        """
        Load configuration for a specific polygon file.

        Looks for <polygon_name>.earclip.json next to the polygon file.
        Returns defaults if config file doesn't exist.
        """
        return cls.load(config_path_for(polygon_filepath))

    def save_for_polygon(self, polygon_filepath: Path | str) -> None:
        """Save as <polygon_name>.earclip.json next to the polygon file."""
        self.save(config_path_for(polygon_filepath))


def config_path_for(polygon_filepath: Path | str) -> Path:
    """Sidecar config path for a polygon file."""
    return Path(polygon_filepath).with_suffix('.earclip.json')
