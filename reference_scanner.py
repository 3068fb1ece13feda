"""
Reference Scanner
Decides whether a string identifier is referenced anywhere in the source
corpus. Matching is plain substring containment of three quoted forms:

    "<id>"     source code
    "@<id>"    storyboard / UI references
    '<id>'     script bundles (.jsbundle)

No tokenizing and no escape handling. A stray match keeps an identifier
alive; it is never reported as abandoned.
"""


def reference_patterns(identifier: str) -> tuple:
    return (
        f'"{identifier}"',
        f'"@{identifier}"',
        f"'{identifier}'",
    )


def is_abandoned(identifier: str, corpus: str) -> bool:
    return not any(p in corpus for p in reference_patterns(identifier))


class ReferenceScanner:
    """Tests identifiers against one shared, read-only corpus."""

    def __init__(self, corpus: str):
        self._corpus = corpus

    @property
    def corpus(self) -> str:
        return self._corpus

    def is_abandoned(self, identifier: str) -> bool:
        return is_abandoned(identifier, self._corpus)

    def find_abandoned(self, identifiers) -> list:
        """Abandoned identifiers in input order, each listed once."""
        abandoned = {}
        for identifier in identifiers:
            if identifier not in abandoned and self.is_abandoned(identifier):
                abandoned[identifier] = True
        return list(abandoned)
