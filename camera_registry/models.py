"""
Camera model variant table.

Each supported lens/projection model is described by a fixed-length
parameter vector layout:

    - focal_length_idxs: slots holding focal lengths (pixels)
    - principal_point_idxs: the (x, y) principal point slots (pixels)
    - extra_params_idxs: distortion or other model-specific coefficients

Conventions:
    - Image origin at the upper-left corner of the upper-left pixel,
      so measurements lie within [0, width] x [0, height]
    - Model names are the canonical identifiers used in configuration
      and reconstruction files (COLMAP naming)
"""

import numpy as np
from typing import Sequence, Tuple
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

INVALID_CAMERA_MODEL_ID = -1
INVALID_CAMERA_MODEL_NAME = "INVALID_CAMERA_MODEL"


@dataclass(frozen=True)
class CameraModel:
    """
    Immutable description of one camera model variant.

    Attributes:
        model_id: Unique non-negative id
        model_name: Unique canonical name
        num_params: Length of the parameter vector
        params_info: Comma separated parameter names, for diagnostics only
        focal_length_idxs: Indices of the focal length parameters
        principal_point_idxs: Indices of the principal point (x, y)
        extra_params_idxs: Indices of distortion/extra parameters
    """
    model_id: int
    model_name: str
    num_params: int
    params_info: str
    focal_length_idxs: Tuple[int, ...]
    principal_point_idxs: Tuple[int, int]
    extra_params_idxs: Tuple[int, ...] = ()

    def __post_init__(self):
        if self.model_id < 0:
            raise ValueError(f"Invalid model id for {self.model_name}: {self.model_id}")
        if not self.model_name:
            raise ValueError(f"Camera model {self.model_id} has no name")
        if self.num_params <= 0:
            raise ValueError(f"Invalid number of params for {self.model_name}")
        if len(self.focal_length_idxs) < 1:
            raise ValueError(f"{self.model_name} needs at least one focal length index")
        if len(self.principal_point_idxs) != 2:
            raise ValueError(f"{self.model_name} needs exactly two principal point indices")

        all_idxs = self.focal_length_idxs + self.principal_point_idxs + self.extra_params_idxs
        for idx in all_idxs:
            if not 0 <= idx < self.num_params:
                raise ValueError(
                    f"Index {idx} out of range for {self.model_name} "
                    f"with {self.num_params} params"
                )

        if len(self.params_info.split(",")) != self.num_params:
            raise ValueError(f"params_info of {self.model_name} does not match num_params")

    def initialize_params(
        self,
        focal_length: float,
        width: float,
        height: float,
    ) -> np.ndarray:
        """
        Create a default parameter vector.

        Focal lengths are set to the guess, the principal point to the image
        center and all extra parameters to zero.

        Args:
            focal_length: Focal length guess in pixels
            width: Image width in pixels
            height: Image height in pixels

        Returns:
            Parameter vector of length num_params
        """
        params = np.zeros(self.num_params, dtype=np.float64)
        for idx in self.focal_length_idxs:
            params[idx] = focal_length
        params[self.principal_point_idxs[0]] = width / 2.0
        params[self.principal_point_idxs[1]] = height / 2.0
        for idx in self.extra_params_idxs:
            params[idx] = 0.0
        return params

    def verify_params(self, params: Sequence[float]) -> bool:
        """Check that params is a flat numeric vector of the right length."""
        try:
            params = np.asarray(params, dtype=np.float64)
        except (TypeError, ValueError):
            return False
        return params.ndim == 1 and len(params) == self.num_params

    def has_bogus_principal_point(
        self,
        params: np.ndarray,
        width: float,
        height: float,
    ) -> bool:
        cx = params[self.principal_point_idxs[0]]
        cy = params[self.principal_point_idxs[1]]
        if cx < 0 or cx > width or cy < 0 or cy > height:
            logger.debug(
                f"{self.model_name}: principal point ({cx}, {cy}) "
                f"outside {width}x{height} image"
            )
            return True
        return False

    def has_bogus_focal_length(
        self,
        params: np.ndarray,
        width: float,
        height: float,
        min_focal_length_ratio: float,
        max_focal_length_ratio: float,
    ) -> bool:
        max_dim = max(width, height)
        for idx in self.focal_length_idxs:
            focal_length_ratio = params[idx] / max_dim
            if (focal_length_ratio < min_focal_length_ratio
                    or focal_length_ratio > max_focal_length_ratio):
                logger.debug(
                    f"{self.model_name}: focal length ratio {focal_length_ratio:.4f} "
                    f"at index {idx} outside "
                    f"[{min_focal_length_ratio}, {max_focal_length_ratio}]"
                )
                return True
        return False

    def has_bogus_extra_params(
        self,
        params: np.ndarray,
        max_extra_param: float,
    ) -> bool:
        for idx in self.extra_params_idxs:
            if abs(params[idx]) > max_extra_param:
                logger.debug(
                    f"{self.model_name}: extra param {params[idx]} at index {idx} "
                    f"exceeds {max_extra_param}"
                )
                return True
        return False

    def has_bogus_params(
        self,
        params: Sequence[float],
        width: float,
        height: float,
        min_focal_length_ratio: float,
        max_focal_length_ratio: float,
        max_extra_param: float,
    ) -> bool:
        """
        Check whether the parameters are implausible for the image size.

        Args:
            params: Parameter vector of length num_params
            width: Image width in pixels
            height: Image height in pixels
            min_focal_length_ratio: Lower bound on focal length / max(width, height)
            max_focal_length_ratio: Upper bound on focal length / max(width, height)
            max_extra_param: Upper bound on the magnitude of each extra parameter

        Returns:
            True if any of the principal point, focal length or extra
            parameter checks fails
        """
        params = np.asarray(params, dtype=np.float64)
        if not np.all(np.isfinite(params)):
            logger.debug(f"{self.model_name}: non-finite params {params.tolist()}")
            return True
        return (
            self.has_bogus_principal_point(params, width, height)
            or self.has_bogus_focal_length(
                params, width, height,
                min_focal_length_ratio, max_focal_length_ratio,
            )
            or self.has_bogus_extra_params(params, max_extra_param)
        )


def _idxs(start: int, stop: int) -> Tuple[int, ...]:
    return tuple(range(start, stop))


# Ordered by model id
CAMERA_MODELS: Tuple[CameraModel, ...] = (
    CameraModel(
        model_id=0,
        model_name="PINHOLE",
        num_params=4,
        params_info="fx, fy, cx, cy",
        focal_length_idxs=(0, 1),
        principal_point_idxs=(2, 3),
    ),
    CameraModel(
        model_id=1,
        model_name="SIMPLE_PINHOLE",
        num_params=3,
        params_info="f, cx, cy",
        focal_length_idxs=(0,),
        principal_point_idxs=(1, 2),
    ),
    CameraModel(
        model_id=2,
        model_name="FOV",
        num_params=5,
        params_info="fx, fy, cx, cy, omega",
        focal_length_idxs=(0, 1),
        principal_point_idxs=(2, 3),
        extra_params_idxs=(4,),
    ),
    CameraModel(
        model_id=3,
        model_name="SIMPLE_RADIAL",
        num_params=4,
        params_info="f, cx, cy, k",
        focal_length_idxs=(0,),
        principal_point_idxs=(1, 2),
        extra_params_idxs=(3,),
    ),
    CameraModel(
        model_id=4,
        model_name="RADIAL",
        num_params=5,
        params_info="f, cx, cy, k1, k2",
        focal_length_idxs=(0,),
        principal_point_idxs=(1, 2),
        extra_params_idxs=(3, 4),
    ),
    CameraModel(
        model_id=5,
        model_name="OPENCV",
        num_params=8,
        params_info="fx, fy, cx, cy, k1, k2, p1, p2",
        focal_length_idxs=(0, 1),
        principal_point_idxs=(2, 3),
        extra_params_idxs=_idxs(4, 8),
    ),
    CameraModel(
        model_id=6,
        model_name="FULL_OPENCV",
        num_params=12,
        params_info="fx, fy, cx, cy, k1, k2, p1, p2, k3, k4, k5, k6",
        focal_length_idxs=(0, 1),
        principal_point_idxs=(2, 3),
        extra_params_idxs=_idxs(4, 12),
    ),
    CameraModel(
        model_id=7,
        model_name="OPENCV_FISHEYE",
        num_params=8,
        params_info="fx, fy, cx, cy, k1, k2, k3, k4",
        focal_length_idxs=(0, 1),
        principal_point_idxs=(2, 3),
        extra_params_idxs=_idxs(4, 8),
    ),
    CameraModel(
        model_id=8,
        model_name="SIMPLE_RADIAL_FISHEYE",
        num_params=4,
        params_info="f, cx, cy, k",
        focal_length_idxs=(0,),
        principal_point_idxs=(1, 2),
        extra_params_idxs=(3,),
    ),
    CameraModel(
        model_id=9,
        model_name="RADIAL_FISHEYE",
        num_params=5,
        params_info="f, cx, cy, k1, k2",
        focal_length_idxs=(0,),
        principal_point_idxs=(1, 2),
        extra_params_idxs=(3, 4),
    ),
    CameraModel(
        model_id=10,
        model_name="THIN_PRISM_FISHEYE",
        num_params=12,
        params_info="fx, fy, cx, cy, k1, k2, p1, p2, k3, k4, sx1, sy1",
        focal_length_idxs=(0, 1),
        principal_point_idxs=(2, 3),
        extra_params_idxs=_idxs(4, 12),
    ),
    # Unified central (cata-dioptric) projection, xi is the mirror parameter
    CameraModel(
        model_id=11,
        model_name="UNIFIED",
        num_params=5,
        params_info="fx, fy, cx, cy, xi",
        focal_length_idxs=(0, 1),
        principal_point_idxs=(2, 3),
        extra_params_idxs=(4,),
    ),
)


def _check_table(models: Tuple[CameraModel, ...]) -> None:
    ids = [model.model_id for model in models]
    names = [model.model_name for model in models]
    if len(set(ids)) != len(ids):
        raise ValueError(f"Duplicate camera model ids: {ids}")
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate camera model names: {names}")
    if INVALID_CAMERA_MODEL_ID in ids or INVALID_CAMERA_MODEL_NAME in names:
        raise ValueError("Camera model table contains the invalid sentinel")


_check_table(CAMERA_MODELS)
