"""Errores del núcleo. Todos heredan de ValueError para que los adaptadores
puedan capturarlos juntos o por separado según ``kind``."""


class ReconstructionError(ValueError):
    kind = "reconstruction_error"


class MalformedInput(ReconstructionError):
    """El documento no es JSON válido o le faltan campos obligatorios."""
    kind = "malformed_input"


class InvalidNumeral(ReconstructionError):
    """Un valor contiene dígitos inválidos para su base, o la base está fuera de rango."""
    kind = "invalid_numeral"


class InsufficientShares(ReconstructionError):
    """Hay menos shares que el umbral k declarado."""
    kind = "insufficient_shares"


class SingularSystem(ReconstructionError):
    """El sistema de interpolación no tiene solución única (x repetidas)."""
    kind = "singular_system"
