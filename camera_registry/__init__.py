"""
Camera Model Registry Package

Defines the closed set of supported camera (lens/projection) models and the
contract of their parameter vectors, so that downstream geometry code can
interpret an opaque vector of floats as focal lengths, principal point and
distortion coefficients.

Operations:
    - Name <-> id lookup with sentinel values for unknown models
    - Default parameter initialization from a focal length guess
    - Introspection of the parameter layout
    - Structural and plausibility validation of parameter vectors

Supported Models:
    PINHOLE, SIMPLE_PINHOLE, FOV, SIMPLE_RADIAL, RADIAL, OPENCV,
    FULL_OPENCV, OPENCV_FISHEYE, SIMPLE_RADIAL_FISHEYE, RADIAL_FISHEYE,
    THIN_PRISM_FISHEYE, UNIFIED
"""

from .models import (
    CameraModel,
    CAMERA_MODELS,
    INVALID_CAMERA_MODEL_ID,
    INVALID_CAMERA_MODEL_NAME,
)
from .registry import (
    CameraModelRegistry,
    InvalidCameraModelError,
    camera_model_id_to_name,
    camera_model_name_to_id,
    exists_camera_model_with_id,
    exists_camera_model_with_name,
    get_camera_model,
    registered_camera_models,
    resolve_camera_model_id,
)
from .params import (
    camera_model_extra_params_idxs,
    camera_model_focal_length_idxs,
    camera_model_has_bogus_params,
    camera_model_initialize_params,
    camera_model_num_params,
    camera_model_params_info,
    camera_model_principal_point_idxs,
    camera_model_verify_params,
)
from .config import BogusParamsOptions

__version__ = "1.0.0"
__all__ = [
    "CameraModel",
    "CAMERA_MODELS",
    "INVALID_CAMERA_MODEL_ID",
    "INVALID_CAMERA_MODEL_NAME",
    "CameraModelRegistry",
    "InvalidCameraModelError",
    "camera_model_id_to_name",
    "camera_model_name_to_id",
    "exists_camera_model_with_id",
    "exists_camera_model_with_name",
    "get_camera_model",
    "registered_camera_models",
    "resolve_camera_model_id",
    "camera_model_extra_params_idxs",
    "camera_model_focal_length_idxs",
    "camera_model_has_bogus_params",
    "camera_model_initialize_params",
    "camera_model_num_params",
    "camera_model_params_info",
    "camera_model_principal_point_idxs",
    "camera_model_verify_params",
    "BogusParamsOptions",
]
