"""
Unit tests for the datetime/date/time output containers.
"""

import pytest

from djust_tz.config import config
from djust_tz.outputs import date_output, datetime_output, time_output


class TestDatetimeOutput:
    def test_block_container(self):
        html = datetime_output("last_update")
        assert html == (
            '<div id="last_update" class="djust-text-output djust-tz-datetime" '
            'data-tz-display="true">Loading...</div>'
        )

    def test_inline_container(self):
        html = datetime_output("inline_time", inline=True)
        assert html.startswith('<span id="inline_time"')
        assert html.endswith("</span>")

    def test_tz_display_false(self):
        assert 'data-tz-display="false"' in datetime_output("x", tz_display=False)

    def test_placeholder_is_escaped(self):
        html = datetime_output("x", placeholder="<b>wait</b>")
        assert "&lt;b&gt;wait&lt;/b&gt;" in html

    def test_output_id_is_escaped(self):
        assert 'id="a&quot;b"' in datetime_output('a"b')

    def test_explicit_container(self):
        assert datetime_output("x", container="p").startswith("<p ")

    def test_invalid_container_rejected(self):
        with pytest.raises(ValueError):
            datetime_output("x", container="div onclick=alert(1)")


class TestDateOutput:
    def test_has_no_tz_display(self):
        html = date_output("processing_date")
        assert html == (
            '<div id="processing_date" class="djust-text-output djust-tz-date">Loading...</div>'
        )


class TestTimeOutput:
    def test_time_placeholder(self):
        html = time_output("current_time")
        assert "--:--:--" in html
        assert "djust-tz-time" in html
        assert 'data-tz-display="true"' in html

    def test_configured_classes(self):
        config.update({"output_class": "text-out", "css_class_prefix": "tz"})
        assert 'class="text-out tz-time"' in time_output("clock")
