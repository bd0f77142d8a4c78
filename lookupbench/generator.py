"""Deterministic generation of short numeric string collections."""

BASE_OFFSET = 1000


def make_short_strings(num_strings: int, modulo_skip: int) -> list[str]:
    """Create a list of short unique decimal strings.

    Candidates ``1000, 1001, ...`` are visited for ``num_strings`` steps and a
    candidate is left out when it is a multiple of ``modulo_skip``. Different
    moduli therefore produce collections that overlap in different ways.

    Args:
        num_strings: Number of candidates to visit (not the output length).
        modulo_skip: Divisor selecting which candidates are skipped.

    Returns:
        Strings in increasing numeric order, at most ``num_strings`` long.

    Raises:
        ValueError: If ``modulo_skip`` is smaller than 1.
    """
    if modulo_skip < 1:
        raise ValueError(f"modulo_skip must be >= 1, got {modulo_skip}")
    strings: list[str] = []
    for i in range(num_strings):
        unique = BASE_OFFSET + i
        if unique % modulo_skip == 0:
            continue
        strings.append(str(unique))
    return strings


def make_collections(num_strings: int, collections) -> dict[str, list[str]]:
    """Generate every named collection for one length.

    Args:
        num_strings: Candidate count shared by all collections.
        collections: Iterable of ``(name, modulo_skip)`` pairs.
    """
    return {name: make_short_strings(num_strings, skip) for name, skip in collections}
