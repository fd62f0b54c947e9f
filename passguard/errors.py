class PassguardError(Exception):
    """Baza pentru toate erorile aruncate de nucleul passguard."""


class InvalidRequest(PassguardError, ValueError):
    """Cerere de generare invalidă (lungime greșită, nicio clasă de caractere etc.)."""


class InvalidPolicy(InvalidRequest):
    """Politica de caractere nu are nicio clasă activă."""


class InvalidInput(PassguardError, ValueError):
    """Parola lipsește sau este goală acolo unde este obligatorie."""


class RandomSourceFailure(PassguardError, RuntimeError):
    """
    Sursa de aleatoriu a sistemului nu e disponibilă.
    Eroare fatală: nu trecem NICIODATĂ pe un generator mai slab.
    """
