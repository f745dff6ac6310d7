import pytest

from blog_api.crosscutting.pagination import build_page_info, normalize_page, page_offset

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "page, limit, expected",
    [
        (None, None, (1, 10)),
        (0, 5, (1, 5)),
        (-3, 5, (1, 5)),
        (2, 0, (2, 10)),
        (2, -1, (2, 1)),
        (1, 1000, (1, 100)),
    ],
)
def test_normalize_page(page, limit, expected):
    assert normalize_page(page, limit, default_limit=10, max_limit=100) == expected


def test_page_offset():
    assert page_offset(1, 10) == 0
    assert page_offset(3, 10) == 20


def test_page_info_middle_page():
    info = build_page_info(page=2, limit=10, total=35)
    assert info.total_pages == 4
    assert info.has_next is True
    assert info.has_prev is True


def test_page_info_empty():
    info = build_page_info(page=1, limit=10, total=0)
    assert info.total_pages == 0
    assert info.has_next is False
    assert info.has_prev is False


def test_page_info_last_page_exact():
    info = build_page_info(page=2, limit=5, total=10)
    assert info.total_pages == 2
    assert info.has_next is False
