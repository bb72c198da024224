import logging

from recovery.config import DEFAULT_METHOD
from recovery.formatter import ReconstructionResult
from recovery.interpolation import reconstruct_polynomial
from recovery.share_parser import parse_shares, sorted_shares
from recovery.share_selector import select_shares

logger = logging.getLogger("recovery.pipeline")


def reconstruct(document, method: str = DEFAULT_METHOD) -> ReconstructionResult:
    """
    Documento -> shares decodificados -> k seleccionados -> polinomio.
    Cada llamada construye su propio resultado; no se guarda estado entre llamadas.
    """
    parsed = parse_shares(document)
    selected = select_shares(parsed.shares, parsed.k)
    polynomial = reconstruct_polynomial(selected, method=method)
    logger.info(f"[PIPELINE] Término constante recuperado con k={parsed.k}")
    return ReconstructionResult(
        n=parsed.n,
        k=parsed.k,
        shares=sorted_shares(parsed.shares),
        selected=selected,
        polynomial=polynomial,
        method=method,
    )
