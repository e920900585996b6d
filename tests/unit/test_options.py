"""Unit tests for promptbridge.services.options: per-route default tables."""

from promptbridge.services.options import (
    DALLE_OPTIONS,
    OMIT,
    REALTIME_TEXT2IMG_OPTIONS,
    TEXT2IMG_OPTIONS,
    merge_options,
)


class TestMergeOptions:
    """merge_options 기본 동작."""

    def test_absent_field_gets_default(self):
        table = (("size", "1024x1024"),)
        assert merge_options(table, {}) == {"size": "1024x1024"}

    def test_null_field_gets_default(self):
        table = (("size", "1024x1024"),)
        assert merge_options(table, {"size": None}) == {"size": "1024x1024"}

    def test_present_falsy_value_is_kept(self):
        table = (("safety_checker", True), ("samples", 1))
        merged = merge_options(table, {"safety_checker": False, "samples": 0})
        assert merged == {"safety_checker": False, "samples": 0}

    def test_omit_field_left_out_when_absent(self):
        table = (("prompt", OMIT),)
        assert merge_options(table, {}) == {}

    def test_omit_field_keeps_explicit_null(self):
        table = (("seed", OMIT),)
        assert merge_options(table, {"seed": None}) == {"seed": None}

    def test_unknown_fields_are_dropped(self):
        table = (("size", "1024x1024"),)
        assert merge_options(table, {"size": "512x512", "extra": 1}) == {"size": "512x512"}

    def test_input_is_not_mutated(self):
        provided = {"n": 2}
        merge_options(DALLE_OPTIONS, provided)
        assert provided == {"n": 2}


class TestDalleOptions:
    def test_defaults(self):
        merged = merge_options(DALLE_OPTIONS, {"prompt": "a cat"})
        assert merged == {"prompt": "a cat", "n": 1, "size": "1024x1024", "quality": "standard"}

    def test_overrides(self):
        merged = merge_options(DALLE_OPTIONS, {"prompt": "a cat", "n": 2, "size": "1792x1024", "quality": "hd"})
        assert merged["n"] == 2
        assert merged["size"] == "1792x1024"
        assert merged["quality"] == "hd"


class TestText2ImgOptions:
    def test_no_defaults_applied(self):
        assert merge_options(TEXT2IMG_OPTIONS, {}) == {}

    def test_passes_through_given_fields(self):
        merged = merge_options(TEXT2IMG_OPTIONS, {"prompt": "castle", "width": 768, "seed": None})
        assert merged == {"prompt": "castle", "width": 768, "seed": None}


class TestRealtimeText2ImgOptions:
    def test_all_defaults(self):
        merged = merge_options(REALTIME_TEXT2IMG_OPTIONS, {})
        assert merged["negative_prompt"] == "bad quality"
        assert merged["width"] == 512
        assert merged["height"] == 512
        assert merged["samples"] == 1
        assert merged["safety_checker"] is False
        assert merged["seed"] is None
        assert merged["guidance_scale"] == 5
        assert merged["webhook"] is None
        assert merged["track_id"] is None
        assert merged["instant_response"] is False
        assert merged["base64"] is False
        assert merged["prompt"].startswith("ultra realistic close up portrait")

    def test_each_field_defaults_independently(self):
        merged = merge_options(REALTIME_TEXT2IMG_OPTIONS, {"width": 1024, "base64": True})
        assert merged["width"] == 1024
        assert merged["height"] == 512
        assert merged["base64"] is True
        assert merged["instant_response"] is False
