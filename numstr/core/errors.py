"""
Errors — иерархия исключений numstr

Все ожидаемые ошибки библиотеки наследуются от NumStrError и дополнительно
от соответствующего встроенного исключения (ValueError, TypeError,
OverflowError), чтобы вызывающий код мог ловить их привычным образом.

Виды ошибок:
- MalformedNumberStringError: строка не соответствует формату, пустой
  десятичный разделитель или пустой шаблон знака
- UnsupportedTypeError: тип вне закрытого списка поддерживаемых типов
- InvalidDigitError: символ вне '0'-'9' в цифровой последовательности
- InvalidEnumValueError: недопустимое значение перечисления
- MissingValueError: обязательный параметр равен None
- NumericRangeError: значение не помещается в целевой fixed-width тип
"""


class NumStrError(Exception):
    """Базовое исключение numstr."""

    pass


class MalformedNumberStringError(NumStrError, ValueError):
    """Некорректная числовая строка или некорректная спецификация разбора."""

    pass


class UnsupportedTypeError(NumStrError, TypeError):
    """
    Тип числового значения не входит в список поддерживаемых.

    Сообщение всегда содержит имя отвергнутого типа.
    """

    def __init__(self, context: str, type_name: str):
        self.context = context
        self.type_name = type_name
        super().__init__(
            f"{context}: unsupported numeric value type '{self.type_name}'"
        )


class InvalidDigitError(NumStrError, ValueError):
    """Символ вне диапазона '0'-'9' передан как цифра."""

    pass


class InvalidEnumValueError(NumStrError, ValueError):
    """Значение знака, типа округления или другого перечисления вне диапазона."""

    pass


class MissingValueError(NumStrError, ValueError):
    """Обязательный параметр не передан (None)."""

    pass


class NumericRangeError(NumStrError, OverflowError):
    """Значение выходит за диапазон целевого числового типа."""

    pass
