"""Tests for the pagination window calculator."""

import pytest

from adoption_catalog.utils.pagination import (
    EllipsisMarker,
    Page,
    build_page_items,
    clamp_page_number,
    compute_total_pages,
    page_slice,
    paginate,
)


def kinds(items):
    return [item.kind for item in items]


def explicit_pages(items):
    return [item.number for item in items if isinstance(item, Page)]


class TestComputeTotalPages:
    @pytest.mark.parametrize(
        "total_items, page_size, expected",
        [(0, 18, 1), (1, 18, 1), (18, 18, 1), (19, 18, 2), (200, 18, 12), (25, 10, 3)],
    )
    def test_ceiling_with_floor_of_one(self, total_items, page_size, expected):
        assert compute_total_pages(total_items, page_size) == expected

    def test_non_positive_page_size_is_single_page(self):
        assert compute_total_pages(50, 0) == 1


class TestHelpers:
    def test_clamp_page_number(self):
        assert clamp_page_number(0, 5) == 1
        assert clamp_page_number(9, 5) == 5
        assert clamp_page_number(3, 5) == 3

    def test_page_slice(self):
        assert page_slice(1, 18) == (0, 18)
        assert page_slice(3, 18) == (36, 54)


class TestBuildPageItems:
    def test_no_items_is_single_current_page(self):
        assert build_page_items(1, 18, 0, with_ellipsis=True) == [Page(number=1, is_current=True)]

    def test_single_page_without_ellipsis(self):
        assert build_page_items(1, 10, 7) == [Page(number=1, is_current=True)]

    def test_full_list_when_ellipsis_disabled(self):
        items = build_page_items(5, 10, 100, with_ellipsis=False)
        assert explicit_pages(items) == list(range(1, 11))
        assert [item.number for item in items if item.is_current] == [5]

    def test_middle_page_has_marker_on_each_side(self):
        items = build_page_items(5, 10, 100, with_ellipsis=True)
        assert explicit_pages(items) == [1, 4, 5, 6, 10]
        assert kinds(items) == [
            "page",
            "start-ellipsis",
            "page",
            "page",
            "page",
            "end-ellipsis",
            "page",
        ]

    def test_first_page_of_twelve(self):
        items = build_page_items(1, 18, 200, with_ellipsis=True)
        assert items == [
            Page(number=1, is_current=True),
            Page(number=2, is_current=False),
            EllipsisMarker(direction="end", number=3),
            Page(number=12, is_current=False),
        ]

    def test_last_page_only_has_start_marker(self):
        items = build_page_items(12, 18, 200, with_ellipsis=True)
        assert kinds(items) == ["page", "start-ellipsis", "page", "page"]
        assert explicit_pages(items) == [1, 11, 12]

    @pytest.mark.parametrize("current_page", [1, 2, 3])
    def test_three_pages_never_elide(self, current_page):
        items = build_page_items(current_page, 10, 30, with_ellipsis=True)
        assert all(isinstance(item, Page) for item in items)
        assert explicit_pages(items) == [1, 2, 3]

    @pytest.mark.parametrize(
        "current_page, expected",
        [
            (1, ["page", "page", "end-ellipsis", "page"]),
            (2, ["page", "page", "page", "end-ellipsis", "page"]),
            (3, ["page", "page", "page", "page", "page"]),
            (4, ["page", "start-ellipsis", "page", "page", "page"]),
            (5, ["page", "start-ellipsis", "page", "page"]),
        ],
    )
    def test_five_pages_keep_at_most_one_marker(self, current_page, expected):
        assert kinds(build_page_items(current_page, 10, 50, with_ellipsis=True)) == expected

    def test_single_elided_page_keeps_its_marker(self):
        items = build_page_items(4, 10, 60, with_ellipsis=True)
        assert kinds(items) == ["page", "start-ellipsis", "page", "page", "page", "page"]
        assert items[1] == EllipsisMarker(direction="start", number=2)

    def test_one_marker_per_run(self):
        items = build_page_items(10, 10, 200, with_ellipsis=True)
        assert kinds(items).count("start-ellipsis") == 1
        assert kinds(items).count("end-ellipsis") == 1

    def test_identical_inputs_yield_equal_output(self):
        assert build_page_items(7, 18, 500, True) == build_page_items(7, 18, 500, True)


class TestPaginationWindow:
    def test_next_is_clamped_at_last_page(self):
        calls = []
        window = paginate(12, 18, 200, on_change=calls.append)
        assert window.handle_next() == 12
        assert calls == [12]

    def test_prev_is_clamped_at_first_page(self):
        window = paginate(1, 18, 200)
        assert window.handle_prev() == 1

    def test_next_and_prev_move_by_one(self):
        calls = []
        window = paginate(5, 10, 100, with_ellipsis=True, on_change=calls.append)
        assert window.handle_next() == 6
        assert window.handle_prev() == 4
        assert calls == [6, 4]

    def test_select_page_invokes_callback(self):
        calls = []
        window = paginate(1, 18, 200, with_ellipsis=True, on_change=calls.append)
        assert window.select(window.items[-1]) == 12
        assert calls == [12]

    def test_select_marker_is_ignored(self):
        calls = []
        window = paginate(1, 18, 200, with_ellipsis=True, on_change=calls.append)
        assert window.select(window.items[2]) is None
        assert calls == []

    def test_reports_total_pages_and_bounds(self):
        window = paginate(1, 18, 200, with_ellipsis=True)
        assert window.total_pages == 12
        assert not window.has_prev
        assert window.has_next

    def test_windows_compare_by_value(self):
        assert paginate(3, 10, 90, True) == paginate(3, 10, 90, True, on_change=print)
