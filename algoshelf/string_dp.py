"""Dynamic programmes over strings: subsequences, substrings and palindromes."""

from __future__ import annotations


def _lcs_table(a: str, b: str) -> list[list[int]]:
    """Return the table whose cell [i][j] is the LCS length of a[:i] and b[:j]."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, a_char in enumerate(a, start=1):
        row, above = table[i], table[i - 1]
        for j, b_char in enumerate(b, start=1):
            if a_char == b_char:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def lcs_length(a: str, b: str) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    return _lcs_table(a, b)[len(a)][len(b)]


def longest_common_subsequence(a: str, b: str) -> str:
    """Return one longest common subsequence of ``a`` and ``b``.

    When both directions keep the same length, the walk back drops a
    character of ``b`` first.
    """
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    picked: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] < table[i - 1][j]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def longest_common_substring(a: str, b: str) -> int:
    """Return the length of the longest run of characters found in both strings."""
    best = 0
    previous = [0] * (len(b) + 1)
    for a_char in a:
        current = [0] * (len(b) + 1)
        for j, b_char in enumerate(b, start=1):
            if a_char == b_char:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def longest_palindromic_subsequence(s: str) -> int:
    """Return the length of the longest subsequence of ``s`` that reads the same reversed."""
    return lcs_length(s[::-1], s)


def longest_repeating_subsequence(s: str) -> int:
    """Return the length of the longest subsequence that occurs twice in ``s``.

    The two occurrences may share no position of ``s`` for the same character.
    """
    n = len(s)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if s[i - 1] == s[j - 1] and i != j:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table[n][n]


def min_insertions_deletions(a: str, b: str) -> int:
    """Return the fewest single-character deletions plus insertions turning ``a`` into ``b``."""
    common = lcs_length(a, b)
    return (len(a) - common) + (len(b) - common)


def shortest_common_supersequence_length(a: str, b: str) -> int:
    """Return the length of the shortest string holding both ``a`` and ``b`` as subsequences."""
    return len(a) + len(b) - lcs_length(a, b)


def shortest_common_supersequence(a: str, b: str) -> str:
    """Return one shortest string that has both ``a`` and ``b`` as subsequences."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    picked: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            picked.append(b[j - 1])
            j -= 1
        else:
            picked.append(a[i - 1])
            i -= 1
    picked.extend(reversed(a[:i]))
    picked.extend(reversed(b[:j]))
    return "".join(reversed(picked))


def palindromic_partition(s: str) -> int:
    """Return the fewest cuts that split ``s`` into palindromic pieces."""
    n = len(s)
    if n == 0:
        return 0
    palindrome = [[False] * n for _ in range(n)]
    for i in range(n - 1, -1, -1):
        for j in range(i, n):
            palindrome[i][j] = s[i] == s[j] and (j - i < 2 or palindrome[i + 1][j - 1])

    # cuts[i] is the fewest cuts for s[i:]; the empty tail counts as -1 so that
    # a piece reaching the end adds no cut.
    cuts = [0] * n + [-1]
    for i in range(n - 1, -1, -1):
        cuts[i] = min(1 + cuts[k + 1] for k in range(i, n) if palindrome[i][k])
    return cuts[0]