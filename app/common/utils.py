from flask import request


def wants_json() -> bool:
    """True si le client préfère JSON à HTML (en-tête Accept)."""
    best = request.accept_mimetypes.best_match(["text/html", "application/json"])
    return best == "application/json"
