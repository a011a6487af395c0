from typing import Iterator


def chunk_text(text: str, max_len: int) -> Iterator[str]:
    """
    Split `text` into pieces of at most `max_len` characters.

    Text that already fits is returned as a single piece. Otherwise each
    piece ends just after the last newline among the next `max_len`
    characters, so lines are kept intact, and a run of `max_len` characters
    with no newline is cut at exactly `max_len`. Joining the pieces gives
    back `text` unchanged.

    Lengths are counted in characters rather than encoded bytes, so a piece
    never ends in the middle of a multi-byte character.
    """
    if max_len < 1:
        raise ValueError("max_len must be positive")

    if len(text) <= max_len:
        yield text
        return

    remaining = text
    while remaining:
        newline = remaining.rfind("\n", 0, max_len)
        split_at = newline + 1 if newline != -1 else max_len
        yield remaining[:split_at]
        remaining = remaining[split_at:]
