"""
Validation utilities
"""
import re
from decimal import Decimal, InvalidOperation


# Numeric(20, 2): 18 digits before the decimal point
MAX_INTEGER_DIGITS = 18


def normalize_decimal_input(value: str) -> str:
    """
    Нормализовать ввод суммы: убрать пробелы и разделители тысяч

    Example:
        >>> normalize_decimal_input("1,000")
        "1000"
        >>> normalize_decimal_input(" 3 000 ")
        "3000"
    """
    return value.strip().replace(",", "").replace(" ", "")


def validate_decimal_amount(
    value: str,
    max_decimal_places: int = 2,
    allow_negative: bool = False,
) -> tuple[bool, str | None]:
    """
    Валидация денежной суммы (по умолчанию неотрицательной)

    Returns:
        (is_valid, error_message)

    Example:
        >>> validate_decimal_amount("3000")
        (True, None)
        >>> validate_decimal_amount("-5")
        (False, "Сумма не может быть отрицательной")
        >>> validate_decimal_amount("-5", allow_negative=True)
        (True, None)
    """
    normalized = normalize_decimal_input(value)

    try:
        decimal_value = Decimal(normalized)
    except (InvalidOperation, ValueError):
        return False, "Некорректная сумма"

    if not decimal_value.is_finite():
        return False, "Некорректная сумма"

    if decimal_value < 0 and not allow_negative:
        return False, "Сумма не может быть отрицательной"

    unsigned = normalized[1:] if allow_negative and normalized.startswith("-") else normalized

    if not re.match(r"^\d+(\.\d+)?$", unsigned):
        return False, "Некорректная сумма"

    pattern = rf"^\d+(\.\d{{1,{max_decimal_places}}})?$"
    if not re.match(pattern, unsigned):
        return False, f"Максимум {max_decimal_places} знака после запятой"

    integer_part = unsigned.split(".")[0].lstrip("0")
    if len(integer_part) > MAX_INTEGER_DIGITS:
        return False, "Слишком большая сумма"

    return True, None


def validate_and_normalize_amount(
    value,
    max_decimal_places: int = 2,
    allow_negative: bool = False,
) -> Decimal:
    """
    Валидировать сумму и вернуть Decimal (raise exception при ошибке)

    Raises:
        ValueError: если валидация не прошла
    """
    value = str(value)
    is_valid, error = validate_decimal_amount(value, max_decimal_places, allow_negative)
    if not is_valid:
        raise ValueError(error)

    return Decimal(normalize_decimal_input(value))
