"""
Unit Tests for Snapshot Validation
"""

import pytest

from markdraft.core.schemas import ValidationError, validate_draw, validate_mark, validate_snapshot


def minimal_snapshot(**overrides):
    data = {
        "schema_version": 1,
        "library": {
            "list": [[{"name": "A", "power": "Good", "category": "", "tags": [], "description": ""}, True]],
            "categories": [],
            "tags": [],
        },
        "results": {"results": []},
    }
    data.update(overrides)
    return data


class TestValidateSnapshot:

    def test_validate_when_minimal_then_passes(self):
        validate_snapshot(minimal_snapshot())

    def test_validate_when_not_object_then_raises(self):
        with pytest.raises(ValidationError, match="JSON object"):
            validate_snapshot([])

    def test_validate_when_unknown_version_then_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_snapshot(minimal_snapshot(schema_version=2))
        assert exc_info.value.path == "schema_version"

    def test_validate_when_results_missing_then_lists_field(self):
        data = minimal_snapshot()
        del data["results"]

        with pytest.raises(ValidationError) as exc_info:
            validate_snapshot(data)

        assert exc_info.value.errors == ["Missing field: results"]

    def test_validate_when_entry_not_pair_then_raises(self):
        data = minimal_snapshot()
        data["library"]["list"] = [[{"name": "A"}]]

        with pytest.raises(ValidationError) as exc_info:
            validate_snapshot(data)

        assert exc_info.value.path == "library.list[0]"

    def test_validate_when_availability_not_bool_then_raises(self):
        data = minimal_snapshot()
        data["library"]["list"][0][1] = "yes"

        with pytest.raises(ValidationError, match="boolean"):
            validate_snapshot(data)

    def test_validate_when_result_lengths_differ_then_raises(self):
        data = minimal_snapshot(results={"results": [[[{"name": "A"}], []]]})

        with pytest.raises(ValidationError, match="1 marks for 0 draws"):
            validate_snapshot(data)

    def test_validate_when_tags_not_strings_then_reports_each(self):
        data = minimal_snapshot()
        data["library"]["tags"] = ["ok", 3, None]

        with pytest.raises(ValidationError) as exc_info:
            validate_snapshot(data)

        assert len(exc_info.value.errors) == 2


class TestValidateMarkAndDraw:

    def test_validate_mark_when_unknown_power_then_raises(self):
        with pytest.raises(ValidationError, match="Unknown power"):
            validate_mark({"name": "A", "power": "Bad Karma"})

    @pytest.mark.parametrize("power", [["Good"], {"x": 1}, 3])
    def test_validate_mark_when_power_not_string_then_raises(self, power):
        with pytest.raises(ValidationError, match="Unknown power"):
            validate_mark({"name": "A", "power": power})

    @pytest.mark.parametrize("power", [["Good"], {"x": 1}])
    def test_validate_draw_when_power_not_string_then_raises(self, power):
        with pytest.raises(ValidationError, match="Unknown power"):
            validate_draw({"power": power})

    def test_validate_mark_when_name_missing_then_raises(self):
        with pytest.raises(ValidationError, match="name"):
            validate_mark({"power": "Good"})

    def test_validate_draw_when_null_fields_then_passes(self):
        validate_draw({"power": None, "category": None, "tags": []})

    def test_validate_draw_when_category_not_string_then_raises(self):
        with pytest.raises(ValidationError, match="category"):
            validate_draw({"category": 5})
