from __future__ import annotations

from collections.abc import Callable

import pytest

Valute = tuple[str, str, str]  # (char code, name, value)


def _valute(code: str, name: str, value: str) -> str:
    return (
        f'<Valute ID="R0{code}">'
        f"<NumCode>840</NumCode>"
        f"<CharCode>{code}</CharCode>"
        f"<Nominal>1</Nominal>"
        f"<Name>{name}</Name>"
        f"<Value>{value}</Value>"
        f"</Valute>"
    )


@pytest.fixture
def cbr_document() -> Callable[..., bytes]:
    """Build a ValCurs document encoded the way the service serves it."""

    def build(*valutes: Valute, encoding: str = "windows-1251") -> bytes:
        body = "".join(_valute(*v) for v in valutes)
        text = (
            f'<?xml version="1.0" encoding="{encoding}"?>'
            f'<ValCurs Date="01.03.2024" name="Foreign Currency Market">'
            f"{body}</ValCurs>"
        )
        return text.encode(encoding)

    return build
