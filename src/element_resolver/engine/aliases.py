"""
Alias Table - ordered shortcut substitution for selectors.

Test authors name page elements once (``"@email": "input[name=email]"``)
and use the short name in every step. Substitution is plain text
replacement, applied pair by pair in declaration order:

    >>> table = AliasTable({"@email": "input[name=email]"})
    >>> table.apply("form @email")
    'form input[name=email]'

Each pair is applied exactly once, to the output of the pairs before it.
A later alias whose name occurs inside an earlier replacement is therefore
substituted too; nothing is re-scanned after the last pair.
"""

from typing import Iterable, Iterator, List, Mapping, Tuple, Union

from element_resolver.exceptions import ConfigurationError

AliasSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class AliasTable:
    """Immutable, ordered list of (alias, selector) pairs."""
    
    __slots__ = ("_pairs",)
    
    def __init__(self, aliases: AliasSource = ()):
        pairs = aliases.items() if isinstance(aliases, Mapping) else aliases
        ordered: dict = {}
        for pair in pairs:
            try:
                key, value = pair
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Alias entries must be (name, selector) pairs, got {pair!r}"
                ) from e
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigurationError(
                    f"Alias names and selectors must be strings, got {key!r}: {value!r}"
                )
            if key == "":
                raise ConfigurationError("Alias names must not be empty")
            ordered[key] = value
        self._pairs: Tuple[Tuple[str, str], ...] = tuple(ordered.items())
    
    def apply(self, selector: str) -> str:
        """Substitute every alias occurring in ``selector``."""
        for key, value in self._pairs:
            selector = selector.replace(key, value)
        return selector
    
    def as_dict(self) -> dict:
        return dict(self._pairs)
    
    @property
    def pairs(self) -> List[Tuple[str, str]]:
        return list(self._pairs)
    
    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._pairs)
    
    def __len__(self) -> int:
        return len(self._pairs)
    
    def __bool__(self) -> bool:
        return bool(self._pairs)
    
    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)
    
    def __eq__(self, other: object) -> bool:
        if isinstance(other, AliasTable):
            return self._pairs == other._pairs
        return NotImplemented
    
    def __hash__(self) -> int:
        return hash(self._pairs)
    
    def __repr__(self) -> str:
        return f"AliasTable({list(self._pairs)!r})"
