import logging
from pathlib import Path

import pytest

from bazar import Bazar


def summary(chapters):
    return [
        ([Path(name).name for name in chapter.pages], list(chapter.keywords))
        for chapter in chapters
    ]


def test_resolve_groups_related_pages(dictionary_path, page_paths):
    chapters = Bazar(2, dictionary_path, page_paths).resolve()

    assert [c.number for c in chapters] == [0, 1]
    assert summary(chapters) == [
        (["page_a.txt", "page_b.txt"], ["apple", "banana", "cherry", "tree"]),
        (["page_c.txt", "page_d.txt"], ["boat", "fish", "forest", "river", "water"]),
    ]


def test_resolve_drops_shared_keywords(dictionary_path, page_paths):
    chapters = Bazar(3, dictionary_path, page_paths).resolve()

    assert summary(chapters) == [
        (["page_a.txt"], ["banana"]),
        (["page_b.txt"], ["cherry"]),
        (["page_c.txt"], ["boat"]),
        (["page_d.txt"], ["fish", "forest"]),
    ]


def test_zero_threshold_puts_everything_in_one_chapter(dictionary_path, page_paths):
    chapters = Bazar(0, dictionary_path, page_paths).resolve()

    assert len(chapters) == 1
    assert len(chapters.first().pages) == 4


def test_pages_keep_dictionary_words_only(dictionary_path, page_paths):
    bazar = Bazar(2, dictionary_path, page_paths)
    bazar.resolve()

    for page in bazar.pages:
        for word in page.words:
            assert word in bazar.dictionary
    assert "the" not in bazar.pages.first().words


def test_pages_are_processed_in_name_order(dictionary_path, page_paths):
    chapters = Bazar(2, dictionary_path, reversed(page_paths)).resolve()

    assert Path(chapters.first().pages.first()).name == "page_a.txt"


def test_duplicate_page_is_ignored(dictionary_path, page_paths, caplog):
    with caplog.at_level(logging.WARNING):
        bazar = Bazar(2, dictionary_path, page_paths + page_paths[:1])

    assert len(bazar.pages) == 4
    assert "more than once" in caplog.text


def test_negative_threshold(dictionary_path, page_paths):
    with pytest.raises(ValueError):
        Bazar(-1, dictionary_path, page_paths)


def test_missing_page(dictionary_path, tmp_path):
    with pytest.raises(OSError):
        Bazar(2, dictionary_path, [str(tmp_path / "missing.txt")])
