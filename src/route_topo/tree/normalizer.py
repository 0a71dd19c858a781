"""HexKeyNormalizer: converts hex-ish identifier tokens to canonical integers.

Capture files mix several spellings of the same identifier:
- prefixed hex (e.g. "0x02C")
- bare hex with leading zeros (e.g. "02C")
- bare hex without padding (e.g. "2C")
- lower or upper case digits (e.g. "02c")

All four spellings normalize to the same integer (44). Two tokens refer to the
same node if and only if their normalized values are equal.

Tolerance rules:
- Surrounding whitespace is stripped.
- An optional "0x"/"0X" prefix is consumed.
- The longest leading run of hex digits is used; anything after it is ignored
  (e.g. "2Czz" -> 44).
- A token with no hex digit after the optional prefix ("", "0x", "zz")
  normalizes to None.
"""

from __future__ import annotations

import re

# Optional prefix, then a (possibly empty) run of hex digits.
# The digit run uses * rather than + so that "0x" alone consumes the prefix and
# yields an empty run instead of backtracking to read the "0" as a digit.
_HEX_TOKEN = re.compile(r"(0[xX])?([0-9a-fA-F]*)")


class HexKeyNormalizer:
    """Normalizes hex identifier tokens to canonical decimal integers.

    Stateless: one module-level instance may be shared by every caller.

    Example usage:
        normalizer = HexKeyNormalizer()
        normalizer.normalize("0x02C")   # 44
        normalizer.normalize("2c")      # 44
        normalizer.normalize("zz")      # None
    """

    def normalize(self, token: str) -> int | None:
        """Return the base-16 value of ``token``, or None when it has no hex digits.

        Args:
            token: Raw identifier text in any of the supported spellings.

        Returns:
            The canonical integer value, or None for an unparseable token.
        """
        match = _HEX_TOKEN.match(token.strip())
        # match() always succeeds because both groups may be empty
        digits = match.group(2) if match else ""
        if not digits:
            return None
        return int(digits, 16)

    def same_node(self, a: str, b: str) -> bool:
        """Return True when both tokens normalize to the same value."""
        left = self.normalize(a)
        return left is not None and left == self.normalize(b)
