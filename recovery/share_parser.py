"""
Lectura del documento de shares.

El documento tiene la forma::

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

Cada clave distinta de ``keys`` es el índice del share (coordenada x) y su
valor se decodifica desde la base indicada (coordenada y).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, NamedTuple, Tuple, Union

from recovery.base_decoder import decode_numeral
from recovery.config import RESERVED_KEY
from recovery.errors import MalformedInput

logger = logging.getLogger("recovery.parser")


@dataclass(frozen=True)
class RawShare:
    base: int
    value: str


class DecodedShare(NamedTuple):
    """Punto (x, y) de la curva: el índice es la x y el valor decodificado la y."""
    index: int
    value: int


@dataclass(frozen=True)
class ParsedShares:
    n: int
    k: int
    shares: Dict[int, int]


def _load(document: Union[str, bytes, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(document, Mapping):
        return document
    if not isinstance(document, (str, bytes, bytearray)):
        raise MalformedInput(f"Tipo de documento no soportado: {type(document).__name__}.")
    try:
        data = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedInput(f"JSON inválido: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedInput("El documento debe ser un objeto JSON.")
    return data


def _positive_int(value: Any, field: str) -> int:
    # bool es subclase de int y no queremos aceptar "k": true
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInput(f"'{field}' debe ser un entero, se recibió {value!r}.")
    if value < 1:
        raise MalformedInput(f"'{field}' debe ser positivo, se recibió {value}.")
    return value


def parse_raw_share(entry: Any) -> RawShare:
    """Valida un objeto ``{"base": ..., "value": ...}`` sin decodificarlo."""
    if not isinstance(entry, Mapping):
        raise MalformedInput(f"Cada share debe ser un objeto, se recibió {entry!r}.")
    if "base" not in entry or "value" not in entry:
        raise MalformedInput("Cada share necesita los campos 'base' y 'value'.")

    base = entry["base"]
    if isinstance(base, bool):
        raise MalformedInput(f"'base' inválida: {base!r}.")
    if isinstance(base, str):
        # la base viene como texto decimal, ej. "16"
        if not (base.isascii() and base.isdigit()):
            raise MalformedInput(f"'base' debe ser un entero decimal, se recibió {base!r}.")
        base = int(base, 10)
    elif not isinstance(base, int):
        raise MalformedInput(f"'base' debe ser un entero, se recibió {base!r}.")

    value = entry["value"]
    if not isinstance(value, str):
        raise MalformedInput(f"'value' debe ser texto, se recibió {value!r}.")
    return RawShare(base=base, value=value)


def parse_index(key: str) -> int:
    if not (key.isascii() and key.isdigit()):
        raise MalformedInput(f"Índice de share inválido: {key!r}.")
    index = int(key, 10)
    if index < 1:
        raise MalformedInput(f"El índice de share debe ser positivo: {key!r}.")
    return index


def parse_shares(document: Union[str, bytes, Mapping[str, Any]]) -> ParsedShares:
    """
    Devuelve (n, k, {índice: valor decimal}).

    Índices repetidos ("1" y "01", o una clave JSON duplicada): gana el
    último visto y se registra un aviso.
    """
    data = _load(document)

    descriptor = data.get(RESERVED_KEY)
    if not isinstance(descriptor, Mapping):
        raise MalformedInput(f"Falta el objeto '{RESERVED_KEY}' con 'n' y 'k'.")
    if "n" not in descriptor or "k" not in descriptor:
        raise MalformedInput(f"'{RESERVED_KEY}' debe contener 'n' y 'k'.")
    n = _positive_int(descriptor["n"], "n")
    k = _positive_int(descriptor["k"], "k")

    shares: Dict[int, int] = {}
    for key, entry in data.items():
        if key == RESERVED_KEY:
            continue
        index = parse_index(str(key))
        raw = parse_raw_share(entry)
        if index in shares:
            logger.warning(f"[PARSER] Índice {index} repetido (clave {key!r}); se conserva el último")
        shares[index] = decode_numeral(raw.value, raw.base)

    if len(shares) != n:
        logger.warning(f"[PARSER] n={n} declarado pero hay {len(shares)} shares presentes")
    logger.info(f"[PARSER] {len(shares)} shares decodificados (n={n}, k={k})")
    return ParsedShares(n=n, k=k, shares=shares)


def sorted_shares(shares: Mapping[int, int]) -> Tuple[DecodedShare, ...]:
    return tuple(DecodedShare(index, shares[index]) for index in sorted(shares))
