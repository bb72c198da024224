"""
Configuración centralizada del núcleo de reconstrucción
"""

# Clave reservada del documento que describe n y k
RESERVED_KEY = "keys"

# Rango de bases admitidas (dígitos 0-9 y letras a-z)
MIN_BASE = 2
MAX_BASE = 36

# Método de resolución por defecto: "lagrange" o "vandermonde"
DEFAULT_METHOD = "lagrange"

# Por encima de este valor un float ya no representa todos los enteros
FLOAT_EXACT_LIMIT = 2**53
