import math

from services.indexer import AudioEntry
from services.paginator import paginate, parse_page, parse_per_page


def _entries(*names):
    return [AudioEntry(name=name, path=name, folder="") for name in names]


class TestParsing:

    def test_page_defaults(self):
        assert parse_page(None) == 1
        assert parse_page("") == 1
        assert parse_page("abc") == 1
        assert parse_page("0") == 1
        assert parse_page("-3") == 1
        assert parse_page("2.5") == 1

    def test_page_valid(self):
        assert parse_page("1") == 1
        assert parse_page("42") == 42

    def test_per_page_defaults(self):
        assert parse_per_page(None) == 200
        assert parse_per_page("x") == 200
        assert parse_per_page("0") == 200
        assert parse_per_page("1001") == 200
        assert parse_per_page("-1") == 200

    def test_per_page_bounds(self):
        assert parse_per_page("1") == 1
        assert parse_per_page("1000") == 1000

    def test_values_beyond_64_bits_fall_back(self):
        assert parse_page("99999999999999999999") == 1
        assert parse_page(str(2 ** 63)) == 1
        assert parse_page(str(2 ** 63 - 1)) == 2 ** 63 - 1
        assert parse_per_page("99999999999999999999") == 200


class TestPaginate:

    def test_sorted_by_name(self):
        result = paginate(_entries("c.mp3", "a.mp3", "b.mp3"), 1, 10)
        assert [f.name for f in result.files] == ["a.mp3", "b.mp3", "c.mp3"]

    def test_sort_is_ordinal(self):
        result = paginate(_entries("b.mp3", "B.mp3", "a.mp3", "_x.mp3"), 1, 10)
        assert [f.name for f in result.files] == ["B.mp3", "_x.mp3", "a.mp3", "b.mp3"]

    def test_middle_and_last_page(self):
        entries = _entries(*(f"{i:02d}.mp3" for i in range(5)))
        second = paginate(entries, 2, 2)
        assert [f.name for f in second.files] == ["02.mp3", "03.mp3"]
        last = paginate(entries, 3, 2)
        assert [f.name for f in last.files] == ["04.mp3"]
        assert last.total == 5
        assert last.totalPages == 3

    def test_out_of_range_page_is_empty(self):
        result = paginate(_entries("a.mp3", "b.mp3"), 5, 1)
        assert result.files == []
        assert result.page == 5
        assert result.total == 2
        assert result.totalPages == 2

    def test_empty_input(self):
        result = paginate([], 1, 200)
        assert result.files == []
        assert result.total == 0
        assert result.totalPages == 0

    def test_page_size_arithmetic(self):
        for total in (0, 1, 7, 10):
            entries = _entries(*(f"{i}.mp3" for i in range(total)))
            for per_page in (1, 3, 10):
                for page in (1, 2, 4):
                    result = paginate(entries, page, per_page)
                    expected = min(per_page, max(0, total - (page - 1) * per_page))
                    assert len(result.files) == expected
                    assert result.totalPages == math.ceil(total / per_page)

