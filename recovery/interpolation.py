# Reconstrucción del polinomio a partir de k puntos

# ---------------------------
# IMPORTS
# ---------------------------
# Fraction mantiene la aritmética exacta: ni los coeficientes ni los valores
# grandes pierden precisión durante la resolución
import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, List, Sequence, Tuple

from recovery.config import DEFAULT_METHOD, FLOAT_EXACT_LIMIT
from recovery.errors import SingularSystem

logger = logging.getLogger("recovery.solver")


# ---------------------------
# TIPO Polynomial: coeficientes de mayor a menor grado
# ---------------------------
@dataclass(frozen=True)
class Polynomial:
    """
    Polinomio de grado k-1 con coeficientes exactos.
    - coefficients[0] acompaña a x^(k-1)
    - coefficients[-1] es el término constante (el secreto)
    """

    coefficients: Tuple[Fraction, ...]

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    @property
    def constant_term(self) -> Fraction:
        return self.coefficients[-1]

    def evaluate(self, x) -> Fraction:
        # Horner: recorre de mayor a menor grado
        total = Fraction(0)
        for coefficient in self.coefficients:
            total = total * x + coefficient
        return total

    def is_float_exact(self) -> bool:
        """True si convertir todos los coeficientes a float no cambia ninguno."""
        for coefficient in self.coefficients:
            # hasta 2**53 todo entero es representable
            if coefficient.denominator == 1 and abs(coefficient) <= FLOAT_EXACT_LIMIT:
                continue
            try:
                if Fraction(float(coefficient)) != coefficient:
                    return False
            except OverflowError:
                return False
        return True


def _points(points: Iterable[Sequence[int]]) -> Tuple[List[Fraction], List[Fraction]]:
    x_s, y_s = [], []
    for x, y in points:
        x_s.append(Fraction(x))
        y_s.append(Fraction(y))
    if not x_s:
        raise SingularSystem("Se necesita al menos un punto para interpolar.")
    if len(set(x_s)) != len(x_s):
        raise SingularSystem(f"Coordenadas x repetidas: {[str(x) for x in x_s]}.")
    return x_s, y_s


# ---------------------------
# FUNCIÓN lagrange_coefficients: expandir la base de Lagrange
# ---------------------------
def lagrange_coefficients(points: Iterable[Sequence[int]]) -> Polynomial:
    """
    Interpolación de Lagrange con coeficientes explícitos.
    - points: pares (x, y) con x distintas
    Devuelve: Polynomial con los coeficientes de mayor a menor grado.

    Para cada punto i construimos L_i(x) = prod_{j != i} (x - x_j) / (x_i - x_j)
    como lista de coeficientes y sumamos y_i * L_i(x). No se forma ninguna
    matriz.
    """
    x_s, y_s = _points(points)
    k = len(x_s)
    # acumulamos en orden ascendente de grado: total[d] acompaña a x^d
    total = [Fraction(0)] * k

    for i in range(k):
        xi, yi = x_s[i], y_s[i]
        basis = [Fraction(1)]
        den = Fraction(1)
        for j in range(k):
            if i == j:
                continue
            xj = x_s[j]
            # multiplicamos basis por (x - xj)
            shifted = [Fraction(0)] + basis
            for d in range(len(basis)):
                shifted[d] -= xj * basis[d]
            basis = shifted
            den *= xi - xj
        if den == 0:
            raise SingularSystem("Denominador nulo en la base de Lagrange.")
        scale = yi / den
        for d in range(k):
            total[d] += scale * basis[d]

    return Polynomial(tuple(reversed(total)))


# ---------------------------
# FUNCIÓN vandermonde_matrix: filas [x^(k-1), ..., x^0]
# ---------------------------
def vandermonde_matrix(x_s: Sequence[Fraction]) -> List[List[Fraction]]:
    k = len(x_s)
    return [[Fraction(x) ** power for power in range(k - 1, -1, -1)] for x in x_s]


# ---------------------------
# FUNCIÓN solve_linear_system: eliminación gaussiana exacta
# ---------------------------
def solve_linear_system(matrix: Sequence[Sequence[Fraction]], rhs: Sequence[Fraction]) -> List[Fraction]:
    """
    Resuelve A * c = b por eliminación gaussiana con pivoteo parcial sobre
    Fraction. Lanza SingularSystem si alguna columna no tiene pivote.
    """
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix) or len(rhs) != size:
        raise SingularSystem("La matriz debe ser cuadrada y coincidir con el vector.")

    # matriz aumentada [A | b], copiada para no tocar la entrada
    aug = [list(map(Fraction, row)) + [Fraction(value)] for row, value in zip(matrix, rhs)]

    for col in range(size):
        pivot_row = max(range(col, size), key=lambda r: abs(aug[r][col]))
        if aug[pivot_row][col] == 0:
            raise SingularSystem(f"Sistema singular: la columna {col} no tiene pivote.")
        aug[col], aug[pivot_row] = aug[pivot_row], aug[col]

        pivot = aug[col][col]
        for row in range(col + 1, size):
            factor = aug[row][col] / pivot
            if factor == 0:
                continue
            for c in range(col, size + 1):
                aug[row][c] -= factor * aug[col][c]

    # sustitución hacia atrás
    solution = [Fraction(0)] * size
    for row in range(size - 1, -1, -1):
        acc = aug[row][size]
        for c in range(row + 1, size):
            acc -= aug[row][c] * solution[c]
        solution[row] = acc / aug[row][row]
    return solution


def vandermonde_coefficients(points: Iterable[Sequence[int]]) -> Polynomial:
    """Misma salida que lagrange_coefficients, resolviendo el sistema de Vandermonde."""
    x_s, y_s = _points(points)
    return Polynomial(tuple(solve_linear_system(vandermonde_matrix(x_s), y_s)))


METHODS = {
    "lagrange": lagrange_coefficients,
    "vandermonde": vandermonde_coefficients,
}


# ---------------------------
# FUNCIÓN reconstruct_polynomial: punto de entrada del solver
# ---------------------------
def reconstruct_polynomial(points: Iterable[Sequence[int]], method: str = DEFAULT_METHOD) -> Polynomial:
    try:
        solver = METHODS[method]
    except KeyError:
        raise ValueError(f"Método desconocido {method!r}; opciones: {sorted(METHODS)}.") from None
    points = list(points)
    polynomial = solver(points)
    logger.info(f"[SOLVER] Polinomio de grado {polynomial.degree} reconstruido con '{method}'")
    return polynomial
