"""Paged review slider tests for HanziCards."""

import pytest

from hanzicards.classroom import ReviewSlider, SliderSource, page, page_count


class TestPageArithmetic:
    """Test page_count and page."""

    def test_page_count(self):
        assert page_count([], 4) == 0
        assert page_count(range(9), 4) == 3
        assert page_count(range(8), 4) == 2
        assert page_count(range(1), 4) == 1

    def test_page(self):
        assert page(range(9), 0, 4) == [0, 1, 2, 3]
        assert page(range(9), 1, 4) == [4, 5, 6, 7]
        assert page(range(9), 2, 4) == [8]

    def test_page_of_list(self):
        assert page(["天", "地", "人"], 0, 2) == ["天", "地"]

    def test_default_page_size(self):
        assert page_count(range(5)) == 2
        assert page(range(5), 1) == [4]

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            page_count([1], 0)
        with pytest.raises(ValueError):
            page([1], 0, -1)
        with pytest.raises(ValueError):
            ReviewSlider(page_size=0)


class TestSliderState:
    """Test closed/open transitions."""

    def test_starts_closed(self):
        slider = ReviewSlider()
        assert not slider.is_open
        assert slider.source is None
        assert slider.visible([1, 2, 3]) == []

    def test_open_and_close(self):
        slider = ReviewSlider()
        slider.open(SliderSource.REVIEW)
        assert slider.is_open
        assert slider.source == SliderSource.REVIEW
        assert slider.page_index == 0
        slider.close()
        assert not slider.is_open

    def test_open_accepts_string(self):
        slider = ReviewSlider()
        slider.open("mastered")
        assert slider.source == SliderSource.MASTERED

    def test_switching_source_resets_page(self):
        items = list(range(9))
        slider = ReviewSlider()
        slider.open(SliderSource.REVIEW)
        slider.next_page(items)
        assert slider.page_index == 1
        slider.open(SliderSource.MASTERED)
        assert slider.page_index == 0


class TestSliderPaging:
    """Test page navigation."""

    def test_five_items(self):
        items = ["天", "地", "人", "你", "我"]
        slider = ReviewSlider(page_size=4)
        slider.open(SliderSource.REVIEW)
        assert slider.page_count(items) == 2
        assert slider.visible(items) == ["天", "地", "人", "你"]
        assert slider.next_page(items) is True
        assert slider.visible(items) == ["我"]

    def test_next_page_clamps(self):
        items = list(range(9))
        slider = ReviewSlider()
        slider.open(SliderSource.REVIEW)
        for _ in range(5):
            slider.next_page(items)
        assert slider.page_index == 2
        assert not slider.has_next_page(items)

    def test_prev_page_clamps(self):
        slider = ReviewSlider()
        slider.open(SliderSource.REVIEW)
        assert slider.prev_page() is False
        assert slider.page_index == 0

    def test_paging_while_closed(self):
        slider = ReviewSlider()
        assert slider.next_page(list(range(9))) is False
        assert slider.prev_page() is False

    def test_empty_source(self):
        slider = ReviewSlider()
        slider.open(SliderSource.MASTERED)
        assert slider.visible([]) == []
        assert not slider.has_next_page([])
        assert slider.page_label([]) == "0/0"

    def test_shrunk_source_clamps_page(self):
        slider = ReviewSlider()
        slider.open(SliderSource.REVIEW)
        slider.next_page(list(range(9)))
        slider.next_page(list(range(9)))
        assert slider.visible(list(range(5))) == [4]
        assert slider.page_index == 1

    def test_page_label(self):
        items = list(range(5))
        slider = ReviewSlider()
        slider.open(SliderSource.REVIEW)
        assert slider.page_label(items) == "1/2"
        slider.next_page(items)
        assert slider.page_label(items) == "2/2"
