"""
Tests for plausibility threshold configuration.
"""

import pytest

from camera_registry.config import BogusParamsOptions


class TestBogusParamsOptions:
    """Tests for threshold defaults, validation and YAML loading."""

    def test_defaults(self):
        options = BogusParamsOptions()
        assert options.min_focal_length_ratio == 0.1
        assert options.max_focal_length_ratio == 10.0
        assert options.max_extra_param == 1.0
        options.validate()

    @pytest.mark.parametrize("kwargs", [
        dict(min_focal_length_ratio=0.0),
        dict(min_focal_length_ratio=2.0, max_focal_length_ratio=1.0),
        dict(max_extra_param=-0.1),
    ])
    def test_invalid_thresholds(self, kwargs):
        with pytest.raises(ValueError):
            BogusParamsOptions(**kwargs).validate()

    def test_has_bogus_params(self):
        options = BogusParamsOptions(max_focal_length_ratio=2.0)
        assert not options.has_bogus_params(0, [1000.0, 1000.0, 960.0, 540.0], 1920, 1080)
        assert options.has_bogus_params(0, [50.0, 50.0, 960.0, 540.0], 1920, 1080)
        assert options.has_bogus_params(2, [1000.0, 1000.0, 960.0, 540.0, 5.0], 1920, 1080)

    def test_yaml_round_trip(self, tmp_path):
        path = tmp_path / "thresholds.yaml"
        options = BogusParamsOptions(0.2, 3.0, 0.5)
        options.to_yaml(str(path))

        loaded = BogusParamsOptions.from_yaml(str(path))
        assert loaded == options

    def test_yaml_top_level_and_defaults(self, tmp_path):
        path = tmp_path / "thresholds.yaml"
        path.write_text("max_extra_param: 2.5\n")

        loaded = BogusParamsOptions.from_yaml(str(path))
        assert loaded.max_extra_param == 2.5
        assert loaded.min_focal_length_ratio == 0.1
        assert loaded.max_focal_length_ratio == 10.0

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert BogusParamsOptions.from_yaml(str(path)) == BogusParamsOptions()

    def test_empty_section_gives_defaults(self, tmp_path):
        path = tmp_path / "empty_section.yaml"
        path.write_text("bogus_params:\n")
        assert BogusParamsOptions.from_yaml(str(path)) == BogusParamsOptions()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            BogusParamsOptions.from_yaml(str(tmp_path / "missing.yaml"))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("bogus_params:\n  max_extra_param: lots\n")
        with pytest.raises(ValueError):
            BogusParamsOptions.from_yaml(str(path))

    def test_inverted_ratios_rejected(self, tmp_path):
        path = tmp_path / "inverted.yaml"
        path.write_text(
            "bogus_params:\n"
            "  min_focal_length_ratio: 5.0\n"
            "  max_focal_length_ratio: 1.0\n"
        )
        with pytest.raises(ValueError):
            BogusParamsOptions.from_yaml(str(path))
