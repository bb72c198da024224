import os
import sys

import requests

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from recovery.errors import ReconstructionError
from recovery.formatter import render_lines, render_record
from recovery.pipeline import reconstruct
from client.config import EXAMPLE_DOCUMENT


def reconstruct_remote(api_url, document):
    response = requests.post(api_url, json={"document": document}, timeout=15)
    if response.status_code != 200:
        raise SystemExit(f"❌ Error en la reconstrucción remota: {response.text}")
    return render_record(response.json())


def main():
    # Si RECOVERY_API_URL está definida delegamos en el servidor web
    api_url = os.getenv("RECOVERY_API_URL")
    if api_url:
        lines = reconstruct_remote(api_url, EXAMPLE_DOCUMENT)
    else:
        try:
            lines = render_lines(reconstruct(EXAMPLE_DOCUMENT))
        except ReconstructionError as exc:
            print(f"❌ Entrada inválida ({exc.kind}): {exc}")
            return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
