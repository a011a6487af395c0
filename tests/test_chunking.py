import pytest

from slack_cli.chunking import chunk_text


def test_short_text_is_single_chunk():
    assert list(chunk_text("hello", 10)) == ["hello"]


def test_text_at_limit_is_single_chunk():
    assert list(chunk_text("a" * 10, 10)) == ["a" * 10]


def test_empty_text():
    assert list(chunk_text("", 10)) == [""]


def test_hard_split_without_newlines():
    assert list(chunk_text("a" * 25, 10)) == ["a" * 10, "a" * 10, "a" * 5]


def test_splits_after_last_newline_in_window():
    text = "abc\ndef\nghijkl"
    assert list(chunk_text(text, 10)) == ["abc\ndef\n", "ghijkl"]


def test_newline_at_end_of_window_is_kept():
    text = "a" * 9 + "\n" + "b" * 5
    assert list(chunk_text(text, 10)) == ["a" * 9 + "\n", "b" * 5]


def test_newline_just_past_window_is_ignored():
    text = "a" * 10 + "\nbb"
    assert list(chunk_text(text, 10)) == ["a" * 10, "\n", "bb"]


def test_remainder_is_split_on_newlines_too():
    text = "a" * 12 + "\nb\nc"
    assert list(chunk_text(text, 10)) == ["a" * 10, "aa\nb\n", "c"]


def test_counts_characters_not_bytes():
    text = "é" * 10 + "🎉" * 5
    chunks = list(chunk_text(text, 10))
    assert chunks == ["é" * 10, "🎉" * 5]
    for chunk in chunks:
        chunk.encode("utf-8")


@pytest.mark.parametrize(
    "text,max_len",
    [
        ("line one\nline two\nline three\n" * 20, 7),
        ("x" * 101, 3),
        ("\n\n\n\n", 1),
        ("mixed ✓ unicode\nlines ünd more 🌍\n" * 10, 13),
        ("no newline at all", 1),
    ],
)
def test_chunks_rejoin_to_original(text, max_len):
    chunks = list(chunk_text(text, max_len))
    assert "".join(chunks) == text
    assert all(chunks)
    assert all(len(chunk) <= max_len for chunk in chunks)


def test_is_a_one_shot_iterator():
    chunks = chunk_text("a" * 20, 10)
    assert list(chunks) == ["a" * 10, "a" * 10]
    assert list(chunks) == []


def test_rejects_non_positive_max_len():
    with pytest.raises(ValueError):
        list(chunk_text("abc", 0))
