# ---------------------------
# IMPORTS
# ---------------------------
# string nos da el alfabeto de dígitos 0-9 y a-z
import string

from recovery.config import MIN_BASE, MAX_BASE
from recovery.errors import InvalidNumeral

# ---------------------------
# ALFABETO: dígito -> valor
# ---------------------------
# Las letras valen 10..35 y se aceptan en mayúscula o minúscula.
DIGITS = string.digits + string.ascii_lowercase
DIGIT_VALUES = {char: value for value, char in enumerate(DIGITS)}


# ---------------------------
# FUNCIÓN decode_numeral: numeral en base b -> entero exacto
# ---------------------------
def decode_numeral(value_str: str, base: int) -> int:
    """
    Convierte 'value_str' escrito en 'base' a entero decimal.
    - value_str: numeral sin espacios, prefijos ni signo
    - base: entero en [2, 36]
    Devuelve: int de Python (precisión arbitraria, nunca float).

    No usamos int(value_str, base) directamente porque acepta espacios,
    guiones bajos, signos y prefijos como '0x', y aquí cualquier carácter
    fuera del alfabeto de la base debe rechazarse.
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidNumeral(f"La base debe ser un entero, se recibió {base!r}.")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidNumeral(f"Base {base} fuera de rango [{MIN_BASE}, {MAX_BASE}].")
    if not isinstance(value_str, str) or not value_str:
        raise InvalidNumeral(f"Numeral vacío o no textual: {value_str!r}.")

    total = 0
    for position, char in enumerate(value_str):
        digit = DIGIT_VALUES.get(char.lower())
        # también rechaza dígitos válidos en otra base mayor (ej. '2' en base 2)
        if digit is None or digit >= base:
            raise InvalidNumeral(
                f"Carácter {char!r} en la posición {position} no es un dígito válido en base {base}."
            )
        total = total * base + digit
    return total


def encode_numeral(number: int, base: int) -> str:
    """Inversa de decode_numeral para enteros no negativos (dígitos en minúscula)."""
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidNumeral(f"Base {base} fuera de rango [{MIN_BASE}, {MAX_BASE}].")
    if number < 0:
        raise InvalidNumeral("Solo se codifican enteros no negativos.")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, base)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits))
