"""
Name/id registry for camera models.

Provides bidirectional lookup between the canonical model name and the
numeric model id. The lookup maps are built once, on first use, from the
variant table and are read-only afterwards, so lookups from many threads
need no further coordination.

Unknown inputs never raise:
    - unknown names map to INVALID_CAMERA_MODEL_ID
    - unknown ids map to INVALID_CAMERA_MODEL_NAME
"""

import numbers
import threading
from typing import Dict, Optional, Tuple, Union
import logging

from .models import (
    CAMERA_MODELS,
    INVALID_CAMERA_MODEL_ID,
    INVALID_CAMERA_MODEL_NAME,
    CameraModel,
)

logger = logging.getLogger(__name__)


class InvalidCameraModelError(ValueError):
    """Raised when an operation requires a camera model that does not exist."""

    def __init__(self, model_id):
        self.model_id = model_id
        super().__init__(f"Camera model does not exist: {model_id!r}")


class CameraModelRegistry:
    """
    Lazily constructed lookup tables over a camera model table.

    Construction is guarded by a lock so that it runs exactly once even
    when several threads perform their first lookup at the same time.
    """

    def __init__(self, models: Tuple[CameraModel, ...] = CAMERA_MODELS):
        self._models = models
        self._lock = threading.Lock()
        self._by_id: Optional[Dict[int, CameraModel]] = None
        self._name_to_id: Optional[Dict[str, int]] = None
        self.build_count = 0

    def _ensure_built(self) -> None:
        if self._by_id is not None:
            return
        with self._lock:
            if self._by_id is not None:
                return
            by_id = {model.model_id: model for model in self._models}
            name_to_id = {model.model_name: model.model_id for model in self._models}
            self._name_to_id = name_to_id
            # Published last, readers only check this one
            self._by_id = by_id
            self.build_count += 1
            logger.debug(f"Camera model registry built with {len(by_id)} models")

    def find(self, model_id: int) -> Optional[CameraModel]:
        """Return the model with the given id, or None if it does not exist."""
        self._ensure_built()
        # Integers only, bool is an int subclass but never a model id
        if isinstance(model_id, bool) or not isinstance(model_id, numbers.Integral):
            return None
        return self._by_id.get(model_id)

    def get(self, model_id: int) -> CameraModel:
        """Return the model with the given id or raise InvalidCameraModelError."""
        model = self.find(model_id)
        if model is None:
            raise InvalidCameraModelError(model_id)
        return model

    def name_to_id(self, model_name: str) -> int:
        self._ensure_built()
        if not isinstance(model_name, str):
            return INVALID_CAMERA_MODEL_ID
        model_id = self._name_to_id.get(model_name, INVALID_CAMERA_MODEL_ID)
        if model_id == INVALID_CAMERA_MODEL_ID:
            logger.debug(f"Unknown camera model name: {model_name!r}")
        return model_id

    def id_to_name(self, model_id: int) -> str:
        model = self.find(model_id)
        if model is None:
            logger.debug(f"Unknown camera model id: {model_id!r}")
            return INVALID_CAMERA_MODEL_NAME
        return model.model_name

    def models(self) -> Tuple[CameraModel, ...]:
        """All registered models ordered by id."""
        self._ensure_built()
        return tuple(sorted(self._by_id.values(), key=lambda model: model.model_id))


_REGISTRY = CameraModelRegistry()


def get_registry() -> CameraModelRegistry:
    """Return the process-wide registry."""
    return _REGISTRY


def camera_model_name_to_id(model_name: str) -> int:
    """
    Look up the id of a camera model by its exact name.

    Args:
        model_name: Canonical model name, e.g. "PINHOLE"

    Returns:
        Model id, or INVALID_CAMERA_MODEL_ID if no model has this name
    """
    return _REGISTRY.name_to_id(model_name)


def camera_model_id_to_name(model_id: int) -> str:
    """
    Look up the name of a camera model by its id.

    Args:
        model_id: Numeric model id

    Returns:
        Model name, or INVALID_CAMERA_MODEL_NAME if no model has this id
    """
    return _REGISTRY.id_to_name(model_id)


def exists_camera_model_with_name(model_name: str) -> bool:
    return camera_model_name_to_id(model_name) != INVALID_CAMERA_MODEL_ID


def exists_camera_model_with_id(model_id: int) -> bool:
    return _REGISTRY.find(model_id) is not None


def resolve_camera_model_id(model: Union[str, int]) -> int:
    """
    Resolve a model given either by name (configuration, files) or by id
    (in-memory camera objects).

    Returns:
        Model id, or INVALID_CAMERA_MODEL_ID if the model does not exist
    """
    if isinstance(model, str):
        return camera_model_name_to_id(model)
    if exists_camera_model_with_id(model):
        return int(model)
    return INVALID_CAMERA_MODEL_ID


def get_camera_model(model_id: int) -> CameraModel:
    """Strict lookup, raises InvalidCameraModelError for unknown ids."""
    return _REGISTRY.get(model_id)


def registered_camera_models() -> Tuple[CameraModel, ...]:
    return _REGISTRY.models()
