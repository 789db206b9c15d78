"""Reading the ``Cookie`` request header."""


def parse_cookies(header: str) -> dict[str, str]:
    """Map cookie names to values.

    Chunks without ``=`` are skipped and a repeated name keeps its last
    value, so ``"a=1; junk; a=2"`` gives ``{"a": "2"}``.
    """
    chunks = (chunk.partition("=") for chunk in header.split(";"))
    return {name.strip(): value.strip() for name, sep, value in chunks if sep}
