"""
Naming utilities for safe code generation.

Turns SQL Server table and column names, which may contain spaces,
punctuation or leading digits, into identifiers for the target language.
"""

import re
from typing import Dict, Optional, Set


class NameSanitizer:
    """Turns arbitrary names into unique PascalCase identifiers."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_types: Optional[Set[str]] = None,
        digit_prefix: str = "N",
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Language keywords, matched case-sensitively
            builtin_types: Predeclared names that should not be shadowed
            digit_prefix: Prepended to names that would start with a digit
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self.digit_prefix = digit_prefix
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use in the target language.

        The same input always maps to the same output until
        :meth:`reset_used_names` is called; distinct inputs that collapse to
        the same identifier get a numeric suffix.

        Args:
            name: Original name to sanitize
            suffix_on_conflict: Suffix added for reserved words

        Returns:
            Sanitized, unique name
        """
        if name in self._name_cache:
            return self._name_cache[name]

        cleaned = self._clean_basic(name)
        converted = self._to_pascal_case(cleaned)
        if converted and converted[0].isdigit():
            converted = f"{self.digit_prefix}{converted}"
        if not converted:
            converted = "Field"

        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._name_cache[name] = final_name
        self._used_names.add(final_name)
        return final_name

    def _clean_basic(self, name: str) -> str:
        """Replace anything that is not a letter, digit or underscore."""
        cleaned = re.sub(r"[^a-zA-Z0-9_]", "_", str(name))
        return cleaned.strip("_")

    def _split_words(self, name: str) -> list:
        # "UserID" -> User, ID ; "createdAt" -> created, At ; "HTTPCode" -> HTTP, Code
        name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
        name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
        return [part for part in name.split("_") if part]

    def _to_pascal_case(self, name: str) -> str:
        # Keep acronyms as written ("ID" stays "ID"), capitalize the rest
        words = self._split_words(name)
        return "".join(
            word if word.isupper() else word[:1].upper() + word[1:].lower()
            for word in words
        )

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve conflicts with reserved words and names already handed out."""
        if name in self.reserved_words or name in self.builtin_types:
            name = f"{name}{suffix}"

        original_name = name
        counter = 2
        while name in self._used_names:
            name = f"{original_name}{counter}"
            counter += 1

        return name

    def reset_used_names(self):
        """Forget all names handed out so far."""
        self._used_names.clear()
        self._name_cache.clear()
