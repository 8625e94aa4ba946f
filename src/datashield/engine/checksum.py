from __future__ import annotations


def luhn_valid(digits: str) -> bool:
    """Mod-10 double-and-sum check used by payment card numbers.

    Every second digit counting from the rightmost is doubled (minus 9 when
    the product exceeds 9); the number is valid when the total is divisible
    by 10. Non-digit input is never valid.
    """
    if not digits or not (digits.isascii() and digits.isdigit()):
        return False
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = int(ch)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0
