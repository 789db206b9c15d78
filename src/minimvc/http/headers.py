"""Read-only request headers keyed by lowercased name."""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Case-insensitive view of the request headers.

    A repeated header keeps its first value. Nothing in minimvc reads a
    multi-valued header; ``cookie`` and ``content-type`` are looked up once.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {}
        for name, value in (values or {}).items():
            self._values.setdefault(name.lower(), value)

    @classmethod
    def from_asgi(cls, raw: Iterable[tuple[bytes, bytes]]) -> "Headers":
        """Decode the ``headers`` list of an ASGI scope."""
        headers = cls()
        for name, value in raw:
            headers._values.setdefault(name.decode("latin-1").lower(), value.decode("latin-1"))
        return headers

    def __getitem__(self, key: str) -> str:
        return self._values[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Headers({self._values!r})"
