import logging
from typing import Mapping, Tuple

from recovery.errors import InsufficientShares
from recovery.share_parser import DecodedShare, sorted_shares

logger = logging.getLogger("recovery.selector")


def select_shares(shares: Mapping[int, int], k: int) -> Tuple[DecodedShare, ...]:
    """
    Elige los 'k' shares de índice más pequeño, ordenados de menor a mayor.
    El orden de entrada no influye en el resultado.
    """
    if k < 1:
        raise InsufficientShares(f"El umbral debe ser al menos 1, se recibió k={k}.")
    if len(shares) < k:
        raise InsufficientShares(
            f"No hay suficientes shares para reconstruir: se necesitan {k}, hay {len(shares)}."
        )
    selected = sorted_shares(shares)[:k]
    logger.info(f"[SELECTOR] Índices seleccionados: {[share.index for share in selected]}")
    return selected
