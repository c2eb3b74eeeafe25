"""
Parameter vector operations dispatched by camera model id.

    - Initialization of a default parameter vector
    - Introspection of the parameter layout
    - Structural (length) and plausibility (bogus value) validation

Only initialization treats an unknown model id as an error. All other
operations degrade to empty results or False.
"""

import numpy as np
from typing import Sequence, Tuple
import logging

from .registry import InvalidCameraModelError, get_registry

logger = logging.getLogger(__name__)


def camera_model_initialize_params(
    model_id: int,
    focal_length: float,
    width: float,
    height: float,
) -> np.ndarray:
    """
    Initialize the parameter vector of a camera model.

    Image measurements are assumed to lie within [0, dim], i.e. the upper
    left corner is the (0, 0) coordinate rather than the center of the
    upper left pixel, so the principal point is set to (width/2, height/2).

    Args:
        model_id: Camera model id
        focal_length: Focal length guess in pixels
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Parameter vector with focal lengths set to the guess, principal
        point at the image center and extra parameters set to zero

    Raises:
        InvalidCameraModelError if the model does not exist
        ValueError if the focal length or image dimensions are not positive
    """
    model = get_registry().find(model_id)
    if model is None:
        logger.error(f"Cannot initialize params of unknown camera model {model_id!r}")
        raise InvalidCameraModelError(model_id)

    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid image dimensions: {width}x{height}")
    if focal_length <= 0:
        raise ValueError(f"Invalid focal length guess: {focal_length}")

    return model.initialize_params(focal_length, width, height)


def camera_model_params_info(model_id: int) -> str:
    """Human readable parameter names, or an empty string for unknown models."""
    model = get_registry().find(model_id)
    if model is None:
        return ""
    return model.params_info


def camera_model_focal_length_idxs(model_id: int) -> Tuple[int, ...]:
    model = get_registry().find(model_id)
    if model is None:
        return ()
    return model.focal_length_idxs


def camera_model_principal_point_idxs(model_id: int) -> Tuple[int, ...]:
    model = get_registry().find(model_id)
    if model is None:
        return ()
    return model.principal_point_idxs


def camera_model_extra_params_idxs(model_id: int) -> Tuple[int, ...]:
    model = get_registry().find(model_id)
    if model is None:
        return ()
    return model.extra_params_idxs


def camera_model_num_params(model_id: int) -> int:
    """Number of parameters of the model, or 0 for unknown models."""
    model = get_registry().find(model_id)
    if model is None:
        return 0
    return model.num_params


def camera_model_verify_params(model_id: int, params: Sequence[float]) -> bool:
    """
    Check that the parameter vector has the length required by the model.

    Values are not inspected.

    Returns:
        True if the model exists and the vector length matches
    """
    model = get_registry().find(model_id)
    if model is None:
        return False
    return model.verify_params(params)


def camera_model_has_bogus_params(
    model_id: int,
    params: Sequence[float],
    width: float,
    height: float,
    min_focal_length_ratio: float,
    max_focal_length_ratio: float,
    max_extra_param: float,
) -> bool:
    """
    Check whether the parameters are implausible for the given image size.

    Checks, per model:
        1. Principal point within [0, width] x [0, height]
        2. focal_length / max(width, height) within
           [min_focal_length_ratio, max_focal_length_ratio]
        3. |extra param| <= max_extra_param

    Args:
        model_id: Camera model id
        params: Parameter vector
        width: Image width in pixels
        height: Image height in pixels
        min_focal_length_ratio: Minimum focal length ratio
        max_focal_length_ratio: Maximum focal length ratio
        max_extra_param: Maximum absolute value of extra parameters

    Returns:
        True if the parameters are bogus. False for unknown models, which
        cannot be assessed; verify the params structurally first.
    """
    model = get_registry().find(model_id)
    if model is None:
        logger.debug(f"Cannot assess params of unknown camera model {model_id!r}")
        return False

    if not model.verify_params(params):
        logger.debug(
            f"{model.model_name}: expected a vector of {model.num_params} params, "
            f"got {params!r}"
        )
        return True

    return model.has_bogus_params(
        params,
        width,
        height,
        min_focal_length_ratio,
        max_focal_length_ratio,
        max_extra_param,
    )
