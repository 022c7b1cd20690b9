"""Small string exercises: camel case, reduction, sorting and subsequences."""

EMPTY_RESULT = "Empty String"


def camel_case_word_count(text):
    """Count the words of a camel-case string.

    Every character below ``'a'`` in code order starts a new word.
    """
    return sum(1 for ch in text if ord(ch) < ord("a")) + 1


def super_reduce(text):
    """Remove adjacent equal pairs until none remain.

    Returns ``"Empty String"`` when nothing is left.
    """
    stack = []
    for ch in text:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack) or EMPTY_RESULT


def sort_by_length(words):
    """Sort words by length, then alphabetically."""
    return sorted(words, key=lambda word: (len(word), word))


def count_abc_subsequences(text):
    """Count subsequences of the form a+b+c+ (one or more of each, in order)."""
    a_count = b_count = c_count = 0
    for ch in text:
        if ch == "a":
            a_count = 2 * a_count + 1
        elif ch == "b":
            b_count = 2 * b_count + a_count
        elif ch == "c":
            c_count = 2 * c_count + b_count
    return c_count


def split_clues(sentence):
    """Split a semicolon-separated list of crossword words."""
    return sentence.split(";")