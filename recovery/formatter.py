"""
Conversión del resultado a estructuras neutrales para los adaptadores.

Nada aquí escribe en consola ni genera HTML: el adaptador web envuelve las
líneas en su plantilla y el de consola las imprime tal cual.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import List, Tuple, Union

from recovery.interpolation import Polynomial
from recovery.share_parser import DecodedShare

Number = Union[int, float, str]


@dataclass(frozen=True)
class ReconstructionResult:
    n: int
    k: int
    shares: Tuple[DecodedShare, ...]
    selected: Tuple[DecodedShare, ...]
    polynomial: Polynomial
    method: str

    @property
    def constant_term(self) -> Fraction:
        return self.polynomial.constant_term


def to_number(value: Fraction) -> Number:
    """
    Entero exacto si el coeficiente es entero; float en otro caso. Si el
    racional no cabe en un float se devuelve exacto como texto "p/q".
    """
    if value.denominator == 1:
        return value.numerator
    try:
        return float(value)
    except OverflowError:
        return str(value)


def polynomial_terms(polynomial: Polynomial) -> List[Tuple[int, Number]]:
    """
    Pares (grado, coeficiente) de mayor a menor grado. Se omiten los
    coeficientes nulos salvo el constante, que siempre va al final.
    """
    degree = polynomial.degree
    terms = [
        (degree - i, to_number(coefficient))
        for i, coefficient in enumerate(polynomial.coefficients[:-1])
        if coefficient != 0
    ]
    terms.append((0, to_number(polynomial.constant_term)))
    return terms


def _term(degree: int, coefficient: Number) -> str:
    # los racionales exactos "p/q" van entre paréntesis
    text = f"({coefficient})" if isinstance(coefficient, str) else f"{coefficient}"
    return f"{text}x^{degree}" if degree else text


def format_polynomial(polynomial: Polynomial) -> str:
    return " + ".join(_term(degree, coefficient) for degree, coefficient in polynomial_terms(polynomial))


def result_to_dict(result: ReconstructionResult) -> dict:
    return {
        "n": result.n,
        "k": result.k,
        "method": result.method,
        "shares": [{"x": x, "y": y} for x, y in result.shares],
        "selected": [{"x": x, "y": y} for x, y in result.selected],
        "polynomial": [
            {"degree": degree, "coefficient": coefficient}
            for degree, coefficient in polynomial_terms(result.polynomial)
        ],
        "expression": format_polynomial(result.polynomial),
        "constant_term": to_number(result.constant_term),
        "float_exact": result.polynomial.is_float_exact(),
    }


def render_record(record: dict) -> List[str]:
    """Líneas de texto a partir del registro de result_to_dict (local o recibido por la API)."""
    lines = [
        f"Total de shares (n): {record['n']}",
        f"Umbral (k): {record['k']}",
        "",
        "Shares convertidos:",
    ]
    lines += [f"Share {s['x']}: (x={s['x']}, y={s['y']})" for s in record["shares"]]
    lines += ["", f"{record['k']} shares seleccionados para la reconstrucción:"]
    lines += [f"(x={s['x']}, y={s['y']})" for s in record["selected"]]
    lines += [
        "",
        f"Polinomio reconstruido: f(x) = {record['expression']}",
        f"El término constante (c) del polinomio es: {record['constant_term']}",
    ]
    return lines


def render_lines(result: ReconstructionResult) -> List[str]:
    return render_record(result_to_dict(result))
