import enum
from typing import Optional, TypeVar

S = TypeVar("S", bound="SymbolEnum")


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class SymbolEnum(PrintableEnum):
    """Enum whose values are the characters that spell its members in an expression"""

    @classmethod
    def from_symbol(cls: type[S], symbol: str) -> Optional[S]:
        return cls._value2member_map_.get(symbol)  # type: ignore[return-value]
