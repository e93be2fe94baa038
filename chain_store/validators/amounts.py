"""
Validators for chain-sourced numeric values.

Amounts cross the decoder boundary as int, Decimal or decimal strings and
are stored as text to avoid precision loss.
"""

from decimal import Decimal, InvalidOperation

from chain_store.utils.exceptions import InvalidRecordError


def validate_amount(
    amount: int | str | Decimal,
    min_val: Decimal = Decimal("0"),
) -> tuple[bool, Decimal | None, str | None]:
    """
    Validate a chain amount.

    Args:
        amount: Amount as int, Decimal or decimal string
        min_val: Minimum allowed value

    Returns:
        Tuple of (is_valid, parsed_value, error_message)
        - (True, value, None) if valid
        - (False, None, error_message) if invalid

    Examples:
        >>> validate_amount("1000000000000")
        (True, Decimal('1000000000000'), None)
        >>> validate_amount(-10)
        (False, None, "Amount must be >= 0")
    """
    if amount is None or isinstance(amount, (bool, float)):
        return False, None, "Amount must be an int, Decimal or decimal string"

    if isinstance(amount, str):
        amount = amount.strip()
        if not amount:
            return False, None, "Amount is empty"
        # Hex-encoded balances are common in RPC payloads
        if amount.lower().startswith("0x"):
            try:
                amount = int(amount, 16)
            except ValueError:
                return False, None, "Invalid amount format"

    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        return False, None, "Invalid amount format"

    if not value.is_finite():
        return False, None, "Amount must be a finite number"

    if value < min_val:
        return False, None, f"Amount must be >= {min_val}"

    return True, value, None


def normalize_amount(amount: int | str | Decimal, field: str = "amount") -> str:
    """
    Convert an amount to its canonical text form.

    Integral values lose any trailing ".0" so that "1000" and
    Decimal("1000.00") are stored identically.

    Raises:
        InvalidRecordError: If the amount is malformed or negative
    """
    is_valid, value, error = validate_amount(amount)
    if not is_valid:
        raise InvalidRecordError(f"{field}: {error} (got {amount!r})")

    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


def normalize_ratio(value: int | float | str | Decimal, field: str) -> Decimal:
    """
    Convert a ratio-like value (staking ratio, inflation) to Decimal.

    Floats go through str() so 0.1 stays Decimal("0.1").
    """
    if value is None or isinstance(value, bool):
        raise InvalidRecordError(f"{field}: value is required")

    try:
        parsed = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidRecordError(f"{field}: invalid number {value!r}") from None

    if not parsed.is_finite():
        raise InvalidRecordError(f"{field}: must be a finite number")
    return parsed


def validate_int(
    value: int | str,
    field: str,
    min_val: int | None = None,
) -> int:
    """
    Validate an integer field of a decoded record (era, session, index...).

    Accepts ints and integral strings. Bools, floats and None are rejected
    so decoder bugs never reach the store.

    Raises:
        InvalidRecordError: If value is not an integer or is below min_val
    """
    if value is None or isinstance(value, (bool, float)):
        raise InvalidRecordError(f"{field}: must be an integer, got {value!r}")

    if not isinstance(value, int):
        try:
            value = int(value)
        except (TypeError, ValueError):
            raise InvalidRecordError(f"{field}: must be an integer, got {value!r}") from None

    if min_val is not None and value < min_val:
        raise InvalidRecordError(f"{field}: must be >= {min_val}, got {value}")
    return value


def validate_height(height: int, field: str = "height") -> int:
    """
    Validate a chain height. Genesis (0) is a valid height.

    Raises:
        InvalidRecordError: If height is not a non-negative integer
    """
    return validate_int(height, field, min_val=0)
