"""Tests for schema models"""

import re
from datetime import datetime, timezone

from form_scraper.models import (
    CombinedSchema,
    FieldDescriptor,
    FieldOption,
    FormSchema,
    utc_timestamp,
)


def make_field(**overrides):
    values = dict(
        tag="input", label="", name=None, id=None, type="text",
        placeholder=None, required=False, pattern=None, options=None,
    )
    values.update(overrides)
    return FieldDescriptor(**values)


class TestTimestamp:

    def test_fixed_time(self):
        now = datetime(2024, 3, 5, 7, 8, 9, 123456, tzinfo=timezone.utc)
        assert utc_timestamp(now) == "2024-03-05T07:08:09.123Z"

    def test_default_is_iso_utc(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())


class TestSerialization:

    def test_descriptor_key_order(self):
        assert list(make_field().to_dict()) == [
            "tag", "label", "name", "id", "type", "placeholder", "required", "pattern", "options",
        ]

    def test_select_options(self):
        d = make_field(tag="select", type="select", options=(FieldOption("a", "Alpha"),))
        assert d.to_dict()["options"] == [{"value": "a", "label": "Alpha"}]

    def test_form_schema(self):
        schema = FormSchema(fields=(make_field(id="x"),), url="https://x.test", scraped_at="T")
        data = schema.to_dict()
        assert list(data) == ["step1", "url", "scrapedAt"]
        assert data["step1"][0]["id"] == "x"
        assert data["scrapedAt"] == "T"

    def test_combined_schema_shares_one_url_and_timestamp(self):
        combined = CombinedSchema(
            step1=(make_field(id="a"),),
            step2=(make_field(id="b"),),
            url="https://x.test",
            scraped_at="T",
        )
        data = combined.to_dict()
        assert list(data) == ["url", "scrapedAt", "step1", "step2"]
        assert [f["id"] for f in data["step1"]] == ["a"]
        assert [f["id"] for f in data["step2"]] == ["b"]

    def test_descriptors_compare_structurally(self):
        assert make_field(id="a") == make_field(id="a")
        assert make_field(id="a") != make_field(id="b")
