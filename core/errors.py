class HurstError(Exception):
    """Erreur de base du calcul de l'exposant de Hurst."""


class InvalidInputError(HurstError, ValueError):
    """
    La série fournie est inutilisable telle quelle.
    (Trop courte, valeurs non finies, colonne CSV introuvable...)
    """


class NonPositivePriceError(InvalidInputError):
    """Un prix nul ou négatif rend les rendements (P_t / P_{t-1}) indéfinis."""


class ComputationError(HurstError, ArithmeticError):
    """Le calcul lui-même ne peut pas aboutir (échantillon vide, ddof...)."""


class DegenerateRangeError(ComputationError):
    """La plage de tailles de fenêtres (espace log10) serait vide."""


class InsufficientDegreesOfFreedomError(ComputationError):
    """Pas assez de points pour l'écart-type avec la correction ddof demandée."""


class UndefinedWindowMeanError(ComputationError):
    """Aucune valeur R/S exploitable (toutes nulles) pour une taille de fenêtre."""
