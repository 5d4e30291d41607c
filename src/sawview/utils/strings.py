# src/sawview/utils/strings.py
from ..exceptions import RangeError

def shorten(full_string: str, n: int, m: int) -> str:
    """Return the first n and last m characters of a string joined by '...'

    The two windows may overlap, so shorten("ABC", 1, 3) == "A...ABC".
    Raises RangeError if either window is longer than the string.
    """
    length = len(full_string)
    if n < 0 or m < 0 or n > length or m > length:
        raise RangeError(
            f"Invalid range for n/m: ({n}, {m}) on a string of length {length}"
        )
    return f"{full_string[:n]}...{full_string[length - m:]}"
