"""
Negative Number Sign Search — шаблоны отрицательного знака

Каждый NegativeNumberSearchSpec описывает один шаблон:
- BEFORE: ведущие символы ("-123")
- AFTER: завершающие символы ("123-")
- BEFORE_AND_AFTER: пара символов вокруг цифр ("(123)")

NegNumSearchSpecCollection — упорядоченный набор шаблонов конвенции.
Шаблоны проверяются в порядке добавления, побеждает первое совпадение;
перекрывающиеся шаблоны вызывающий код упорядочивает сам (от более
специфичных к менее специфичным).

Состояние конкретного прохода сканера (найден ли ведущий символ пары)
хранится в NegNumSignSearcher, а не в самих спецификациях.
"""

from dataclasses import dataclass
from typing import Iterator

from pydantic import BaseModel, Field, model_validator

from numstr.core.domain.enums import NumSignSymbolPosition
from numstr.core.errors import MalformedNumberStringError


# =============================================================================
# SEARCH SPEC
# =============================================================================


class NegativeNumberSearchSpec(BaseModel):
    """Один шаблон отрицательного знака"""

    position: NumSignSymbolPosition = Field(..., description="Положение символов знака")
    leading_symbols: str = Field(default="", description="Символы перед цифрами")
    trailing_symbols: str = Field(default="", description="Символы после цифр")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_symbols(self) -> "NegativeNumberSearchSpec":
        """Для выбранной позиции обязательные символы непустые, лишние отсутствуют."""
        needs_leading = self.position in (
            NumSignSymbolPosition.BEFORE,
            NumSignSymbolPosition.BEFORE_AND_AFTER,
        )
        needs_trailing = self.position in (
            NumSignSymbolPosition.AFTER,
            NumSignSymbolPosition.BEFORE_AND_AFTER,
        )

        if needs_leading and not self.leading_symbols:
            raise ValueError(f"{self.position.value} pattern requires leading symbols")
        if needs_trailing and not self.trailing_symbols:
            raise ValueError(f"{self.position.value} pattern requires trailing symbols")
        if not needs_leading and self.leading_symbols:
            raise ValueError(f"{self.position.value} pattern must not have leading symbols")
        if not needs_trailing and self.trailing_symbols:
            raise ValueError(f"{self.position.value} pattern must not have trailing symbols")
        return self

    @classmethod
    def leading(cls, symbols: str) -> "NegativeNumberSearchSpec":
        return cls(position=NumSignSymbolPosition.BEFORE, leading_symbols=symbols)

    @classmethod
    def trailing(cls, symbols: str) -> "NegativeNumberSearchSpec":
        return cls(position=NumSignSymbolPosition.AFTER, trailing_symbols=symbols)

    @classmethod
    def leading_and_trailing(
        cls, leading_symbols: str, trailing_symbols: str
    ) -> "NegativeNumberSearchSpec":
        return cls(
            position=NumSignSymbolPosition.BEFORE_AND_AFTER,
            leading_symbols=leading_symbols,
            trailing_symbols=trailing_symbols,
        )


# =============================================================================
# COLLECTION
# =============================================================================


class NegNumSearchSpecCollection:
    """
    Упорядоченный набор шаблонов отрицательного знака.

    Пустые строки шаблонов отвергаются с MalformedNumberStringError.
    """

    def __init__(self, specs: list[NegativeNumberSearchSpec] | None = None):
        self._specs: list[NegativeNumberSearchSpec] = list(specs or [])

    def add_leading_neg_num_search_str(self, leading_symbols: str) -> None:
        """Добавить ведущий шаблон ("-123")."""
        if not leading_symbols:
            raise MalformedNumberStringError("leading negative sign symbols must not be empty")
        self._specs.append(NegativeNumberSearchSpec.leading(leading_symbols))

    def add_trailing_neg_num_search_str(self, trailing_symbols: str) -> None:
        """Добавить завершающий шаблон ("123-")."""
        if not trailing_symbols:
            raise MalformedNumberStringError("trailing negative sign symbols must not be empty")
        self._specs.append(NegativeNumberSearchSpec.trailing(trailing_symbols))

    def add_leading_and_trailing_neg_num_search_str(
        self, leading_symbols: str, trailing_symbols: str
    ) -> None:
        """Добавить парный шаблон ("(123)")."""
        if not leading_symbols or not trailing_symbols:
            raise MalformedNumberStringError(
                "leading and trailing negative sign symbols must not be empty, "
                f"got leading='{leading_symbols}' trailing='{trailing_symbols}'"
            )
        self._specs.append(
            NegativeNumberSearchSpec.leading_and_trailing(leading_symbols, trailing_symbols)
        )

    def get_specs(self) -> list[NegativeNumberSearchSpec]:
        """Копия списка шаблонов в порядке добавления."""
        return list(self._specs)

    def copy(self) -> "NegNumSearchSpecCollection":
        return NegNumSearchSpecCollection(self._specs)

    def empty(self) -> None:
        self._specs.clear()

    def is_empty(self) -> bool:
        return not self._specs

    def new_searcher(self) -> "NegNumSignSearcher":
        """Новое состояние поиска для одного прохода сканера."""
        return NegNumSignSearcher(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[NegativeNumberSearchSpec]:
        return iter(list(self._specs))


# =============================================================================
# PER-SCAN SEARCH STATE
# =============================================================================


@dataclass(frozen=True)
class NegNumSignMatch:
    """Результат проверки шаблонов в одной позиции."""

    matched: bool  # Совпали какие-либо символы шаблона
    is_negative: bool  # Шаблон совпал полностью: число отрицательное
    position: NumSignSymbolPosition | None
    consumed_chars: int  # Сколько символов поглощено совпадением


_NO_MATCH = NegNumSignMatch(matched=False, is_negative=False, position=None, consumed_chars=0)


class NegNumSignSearcher:
    """
    Поиск символов отрицательного знака в одном проходе сканера.

    До первой цифры проверяются ведущие символы (BEFORE и первая половина
    BEFORE_AND_AFTER), после первой цифры — завершающие (AFTER и вторая
    половина BEFORE_AND_AFTER, если её ведущая часть уже найдена).
    """

    def __init__(self, specs: list[NegativeNumberSearchSpec]):
        self._specs = list(specs)
        self._leading_found: list[bool] = [False] * len(self._specs)

    def search(self, text: str, index: int, found_first_digit: bool) -> NegNumSignMatch:
        """
        Проверка шаблонов в позиции index.

        Args:
            text: Целевая строка
            index: Текущая позиция сканера
            found_first_digit: Найдена ли уже первая цифра

        Returns:
            NegNumSignMatch; первое совпадение в порядке добавления побеждает
        """
        for i, spec in enumerate(self._specs):
            if not found_first_digit:
                if spec.position == NumSignSymbolPosition.BEFORE:
                    if text.startswith(spec.leading_symbols, index):
                        return NegNumSignMatch(
                            matched=True,
                            is_negative=True,
                            position=spec.position,
                            consumed_chars=len(spec.leading_symbols),
                        )
                elif spec.position == NumSignSymbolPosition.BEFORE_AND_AFTER:
                    if not self._leading_found[i] and text.startswith(spec.leading_symbols, index):
                        self._leading_found[i] = True
                        return NegNumSignMatch(
                            matched=True,
                            is_negative=False,
                            position=spec.position,
                            consumed_chars=len(spec.leading_symbols),
                        )
                continue

            if spec.position == NumSignSymbolPosition.AFTER:
                if text.startswith(spec.trailing_symbols, index):
                    return NegNumSignMatch(
                        matched=True,
                        is_negative=True,
                        position=spec.position,
                        consumed_chars=len(spec.trailing_symbols),
                    )
            elif spec.position == NumSignSymbolPosition.BEFORE_AND_AFTER:
                if self._leading_found[i] and text.startswith(spec.trailing_symbols, index):
                    return NegNumSignMatch(
                        matched=True,
                        is_negative=True,
                        position=spec.position,
                        consumed_chars=len(spec.trailing_symbols),
                    )

        return _NO_MATCH
