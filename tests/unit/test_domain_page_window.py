"""Unit tests for the PageWindow value object.

Covers page clamping, offset arithmetic and total page computation.
"""

import pytest

from src.domain.value_objects import PageWindow


@pytest.mark.unit
class TestPageWindowResolve:
    """Test PageWindow.resolve() clamping."""

    def test_in_range_page_is_kept(self):
        window = PageWindow.resolve(requested_page=2, page_size=10, total_items=25)

        assert window.page_number == 2
        assert window.total_pages == 3
        assert window.offset == 10
        assert window.limit == 10

    @pytest.mark.parametrize("requested", [0, -1, -100])
    def test_page_below_one_is_clamped_to_first(self, requested):
        window = PageWindow.resolve(requested_page=requested, page_size=10, total_items=25)

        assert window.page_number == 1
        assert window.offset == 0

    def test_page_past_end_is_clamped_to_last(self):
        window = PageWindow.resolve(requested_page=9, page_size=10, total_items=25)

        assert window.page_number == 3
        assert window.offset == 20

    def test_empty_result_serves_page_one_with_zero_pages(self):
        window = PageWindow.resolve(requested_page=4, page_size=10, total_items=0)

        assert window.page_number == 1
        assert window.total_pages == 0
        assert window.offset == 0

    def test_exact_multiple_has_no_trailing_page(self):
        window = PageWindow.resolve(requested_page=5, page_size=5, total_items=20)

        assert window.total_pages == 4
        assert window.page_number == 4

    def test_rejects_page_size_below_one(self):
        with pytest.raises(ValueError, match="page_size"):
            PageWindow.resolve(requested_page=1, page_size=0, total_items=3)


@pytest.mark.unit
class TestPageWindowInvariants:
    """Test PageWindow constructor validation."""

    def test_is_immutable(self):
        window = PageWindow(page_number=1, page_size=10, total_items=0)

        with pytest.raises(AttributeError):
            window.page_number = 2  # type: ignore[misc]

    def test_rejects_negative_total(self):
        with pytest.raises(ValueError, match="total_items"):
            PageWindow(page_number=1, page_size=10, total_items=-1)

    def test_rejects_page_number_below_one(self):
        with pytest.raises(ValueError, match="page_number"):
            PageWindow(page_number=0, page_size=10, total_items=5)
