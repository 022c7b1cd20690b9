"""Union and intersection of sets kept as ordered lists."""


def set_union(first, second):
    """Return ``first`` followed by the elements of ``second`` not yet present.

    Elements of ``first`` are kept as given, repeats included.
    """
    result = list(first)
    seen = set(result)
    for item in second:
        if item not in seen:
            result.append(item)
            seen.add(item)
    return result


def set_intersection(first, second):
    """Return the elements of ``second``, in order, that also occur in ``first``."""
    members = set(first)
    return [item for item in second if item in members]


def format_set(items):
    """Render items in parentheses, each followed by a comma."""
    return "(" + "".join(f"{item}," for item in items) + ")"