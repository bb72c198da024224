# Configuración de los adaptadores (web y consola)

SERVER_HOST = "127.0.0.1"
SERVER_PORT = 5000

API_PATH = "/api/reconstruct"
SERVER_URL = f"http://{SERVER_HOST}:{SERVER_PORT}{API_PATH}"

# Documento de ejemplo: 9 shares en bases variadas, umbral 6
EXAMPLE_DOCUMENT = """{
  "keys": {
    "n": 9,
    "k": 6
  },
  "1": {
    "base": "10",
    "value": "28735619723837"
  },
  "2": {
    "base": "16",
    "value": "1A228867F0CA"
  },
  "3": {
    "base": "12",
    "value": "32811A4AA0B7B"
  },
  "4": {
    "base": "11",
    "value": "917978721331A"
  },
  "5": {
    "base": "16",
    "value": "1A22886782E1"
  },
  "6": {
    "base": "10",
    "value": "28735619654702"
  },
  "7": {
    "base": "14",
    "value": "71AB5070CC4B"
  },
  "8": {
    "base": "9",
    "value": "122662581541670"
  },
  "9": {
    "base": "8",
    "value": "642121030037605"
  }
}"""
