"""Tests for keyset_i18n.i18n.interpolation module."""

import pytest

from keyset_i18n.i18n.interpolation import interpolate


@pytest.mark.unit
class TestInterpolate:
    """Tests for {{name}} interpolation."""

    def test_interpolate_single_variable(self):
        """interpolate() replaces a single placeholder."""
        assert interpolate("Hello, {{username}}!", {"username": "Joe"}) == "Hello, Joe!"

    def test_interpolate_multiple_variables(self):
        """interpolate() replaces several placeholders."""
        result = interpolate(
            "User {{user}} updated role {{role}}",
            {"user": "alice", "role": "admin"},
        )
        assert result == "User alice updated role admin"

    def test_interpolate_repeated_placeholder(self):
        """Every occurrence of a placeholder is replaced."""
        assert interpolate("{{a}} and {{a}}", {"a": "x"}) == "x and x"

    def test_interpolate_unknown_placeholder_kept(self):
        """Placeholders without a parameter stay verbatim."""
        result = interpolate("Hi {{name}}, see {{link}}", {"name": "Ann"})
        assert result == "Hi Ann, see {{link}}"

    def test_interpolate_converts_to_string(self):
        """Non-string values are converted with str()."""
        assert interpolate("Count: {{count}}", {"count": 42}) == "Count: 42"
        assert interpolate("Ratio: {{r}}", {"r": 0.5}) == "Ratio: 0.5"

    def test_interpolate_no_params(self):
        """Templates are returned unchanged without parameters."""
        assert interpolate("Simple {{message}}", {}) == "Simple {{message}}"

    def test_interpolate_extra_params_ignored(self):
        """Parameters with no placeholder are ignored."""
        assert interpolate("Incident {{id}}", {"id": "1", "extra": "x"}) == "Incident 1"

    @pytest.mark.parametrize(
        "value",
        ["money $ honey", "$&", "$1", "\\1", "\\g<0>", "{{other}}"],
    )
    def test_interpolate_values_inserted_literally(self, value):
        """Values are never parsed as replacement templates."""
        result = interpolate("Give me {{money}}!", {"money": value, "other": "nope"})
        assert result == f"Give me {value}!"

    def test_interpolate_single_braces_untouched(self):
        """Single-brace text is not a placeholder."""
        assert interpolate("{name}", {"name": "x"}) == "{name}"

    def test_interpolate_after_stray_braces(self):
        """An unclosed {{ does not hide a later placeholder."""
        assert interpolate("Use {{ or {{name}}", {"name": "Joe"}) == "Use {{ or Joe"

    def test_interpolate_nested_opening_braces(self):
        """Extra opening braces stay in front of the substituted value."""
        assert interpolate("{{{{name}}", {"name": "Joe"}) == "{{Joe"

    def test_interpolate_does_not_span_placeholders(self):
        """A match never runs across two placeholders."""
        result = interpolate("{{a}} }} {{b}}", {"a": "1", "b": "2"})
        assert result == "1 }} 2"
