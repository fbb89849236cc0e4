from sample_common.typeutils.require import require_instance

def word_count(text: str) -> int:
    """
    Count the words in `text`, where words are separated by the space character.

    Runs of spaces never produce empty words. Only the space character separates words;
    tabs and newlines are treated as part of a word.

    Args:
        text (str):
            The text to count.

    Returns:
        int:
            The number of non-empty, space-separated words.

    Raises:
        ValueError:
            If `text` is None.
        TypeError:
            If `text` is not a string.

    Example:
        >>> word_count("How many words are in this line of text")
        9
    """
    words = require_instance(str, text, "text").split(" ")
    return sum(1 for word in words if word)
