"""
Configuration for camera parameter plausibility checks.

Handles loading and validation of the thresholds from YAML files.
"""

import yaml
from pathlib import Path
from dataclasses import dataclass
from typing import Sequence
import logging

from .params import camera_model_has_bogus_params

logger = logging.getLogger(__name__)


@dataclass
class BogusParamsOptions:
    """
    Thresholds used to flag implausible camera parameters.

    Attributes:
        min_focal_length_ratio: Minimum focal length / max(width, height)
        max_focal_length_ratio: Maximum focal length / max(width, height)
        max_extra_param: Maximum absolute value of any extra (distortion) parameter
    """
    min_focal_length_ratio: float = 0.1
    max_focal_length_ratio: float = 10.0
    max_extra_param: float = 1.0

    def validate(self) -> None:
        """
        Validate the thresholds.

        Raises:
            ValueError if a threshold is not positive or the ratio bounds are inverted
        """
        if self.min_focal_length_ratio <= 0:
            raise ValueError(
                f"Invalid min_focal_length_ratio: {self.min_focal_length_ratio}"
            )
        if self.max_focal_length_ratio < self.min_focal_length_ratio:
            raise ValueError(
                f"max_focal_length_ratio ({self.max_focal_length_ratio}) is smaller "
                f"than min_focal_length_ratio ({self.min_focal_length_ratio})"
            )
        if self.max_extra_param < 0:
            raise ValueError(f"Invalid max_extra_param: {self.max_extra_param}")

    def has_bogus_params(
        self,
        model_id: int,
        params: Sequence[float],
        width: float,
        height: float,
    ) -> bool:
        """Check params against these thresholds, see camera_model_has_bogus_params."""
        return camera_model_has_bogus_params(
            model_id,
            params,
            width,
            height,
            self.min_focal_length_ratio,
            self.max_focal_length_ratio,
            self.max_extra_param,
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "BogusParamsOptions":
        """
        Load thresholds from a YAML file.

        Missing keys keep their defaults. The thresholds may be given at the
        top level or nested under a 'bogus_params' section.

        Example YAML structure:
            bogus_params:
              min_focal_length_ratio: 0.1
              max_focal_length_ratio: 10.0
              max_extra_param: 1.0
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML format in file '{config_path}': {e}")

        logger.info(f"Loading plausibility thresholds from {config_path}")

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in '{config_path}'")
        if 'bogus_params' in data:
            section = data['bogus_params'] or {}
        else:
            section = data

        defaults = cls()
        try:
            options = cls(
                min_focal_length_ratio=float(
                    section.get('min_focal_length_ratio', defaults.min_focal_length_ratio)
                ),
                max_focal_length_ratio=float(
                    section.get('max_focal_length_ratio', defaults.max_focal_length_ratio)
                ),
                max_extra_param=float(
                    section.get('max_extra_param', defaults.max_extra_param)
                ),
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid threshold format in '{config_path}': {e}")

        options.validate()
        return options

    def to_yaml(self, config_path: str) -> None:
        """Save thresholds to a YAML file."""
        data = {
            'bogus_params': {
                'min_focal_length_ratio': self.min_focal_length_ratio,
                'max_focal_length_ratio': self.max_focal_length_ratio,
                'max_extra_param': self.max_extra_param,
            },
        }

        with open(config_path, 'w') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Plausibility thresholds saved to {config_path}")
