"""
Tests for the camera model variant table.
"""

import dataclasses

import pytest

from camera_registry.models import (
    CAMERA_MODELS,
    INVALID_CAMERA_MODEL_ID,
    INVALID_CAMERA_MODEL_NAME,
    CameraModel,
)


class TestVariantTable:
    """Tests for the static table contents."""

    def test_ids_unique(self):
        ids = [model.model_id for model in CAMERA_MODELS]
        assert len(ids) == len(set(ids))
        assert INVALID_CAMERA_MODEL_ID not in ids

    def test_names_unique(self):
        names = [model.model_name for model in CAMERA_MODELS]
        assert len(names) == len(set(names))
        assert INVALID_CAMERA_MODEL_NAME not in names

    @pytest.mark.parametrize("model", CAMERA_MODELS, ids=lambda m: m.model_name)
    def test_params_info_matches_num_params(self, model):
        assert len(model.params_info.split(", ")) == model.num_params

    def test_models_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CAMERA_MODELS[0].num_params = 10


class TestCameraModelChecks:
    """Tests for layout checks on construction."""

    def _make(self, **overrides):
        fields = dict(
            model_id=100,
            model_name="TEST",
            num_params=4,
            params_info="fx, fy, cx, cy",
            focal_length_idxs=(0, 1),
            principal_point_idxs=(2, 3),
        )
        fields.update(overrides)
        return CameraModel(**fields)

    def test_valid_model(self):
        model = self._make()
        assert model.extra_params_idxs == ()

    def test_index_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            self._make(principal_point_idxs=(2, 4))

    def test_wrong_principal_point_count(self):
        with pytest.raises(ValueError):
            self._make(principal_point_idxs=(2,))

    def test_no_focal_length(self):
        with pytest.raises(ValueError):
            self._make(focal_length_idxs=())

    def test_negative_id(self):
        with pytest.raises(ValueError):
            self._make(model_id=-1)

    def test_empty_name(self):
        with pytest.raises(ValueError):
            self._make(model_name="")

    def test_params_info_mismatch(self):
        with pytest.raises(ValueError):
            self._make(params_info="fx, fy, cx")
