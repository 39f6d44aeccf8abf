"""Tests for models."""

import pytest

from tabletext import Column, RenderOptions, RenderRequest, RowSource


class TestRenderOptions:
    """Tests for RenderOptions."""

    def test_defaults(self) -> None:
        """Test default options."""
        options = RenderOptions()
        assert options.alignments is None
        assert options.show_title is True
        assert options.alignment(3) == "l"

    def test_invalid_alignment(self) -> None:
        """Test unknown alignments are rejected."""
        with pytest.raises(ValueError, match="Unknown alignment 'x'"):
            RenderOptions(alignments=("l", "x"))

    def test_alignment_lookup(self) -> None:
        """Test per-column alignment lookup."""
        options = RenderOptions(alignments=("r", "c"))
        assert options.alignment(0) == "r"
        assert options.alignment(1) == "c"
        assert options.alignment(2) == "l"

    def test_from_spec(self) -> None:
        """Test parsing a comma-separated spec."""
        options = RenderOptions.from_spec(" L, r ,c", show_title=False)
        assert options.alignments == ("l", "r", "c")
        assert options.show_title is False

    def test_from_empty_spec(self) -> None:
        """Test an empty spec means default alignment."""
        assert RenderOptions.from_spec("") == RenderOptions()

    def test_from_spec_invalid(self) -> None:
        """Test an invalid spec raises ValueError."""
        with pytest.raises(ValueError):
            RenderOptions.from_spec("l,left")

    def test_frozen(self) -> None:
        """Test options are immutable."""
        options = RenderOptions()
        with pytest.raises(AttributeError):
            options.show_title = False  # type: ignore[misc]


class TestColumn:
    """Tests for Column."""

    def test_render_passes_strings_through(self) -> None:
        """Test string values are returned unchanged."""
        assert Column("A", lambda r: r).render("abc") == "abc"

    def test_render_converts_values(self) -> None:
        """Test non-string values are converted."""
        assert Column("A", lambda r: r * 2).render(2.5) == "5.0"


class TestRenderRequest:
    """Tests for RenderRequest."""

    def test_fields(self) -> None:
        """Test request holds title and source."""
        source = RowSource([], [])
        request = RenderRequest(title="T", source=source)
        assert request.title == "T"
        assert request.source is source
