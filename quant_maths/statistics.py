import numpy as np
from core.errors import InsufficientDegreesOfFreedomError, UndefinedWindowMeanError

def standard_deviation(series, ddof=1):
    """
    Écart-type avec correction des degrés de liberté (ddof).
    Formule : sqrt( sum((x_i - moyenne)^2) / (n - ddof) )

    ddof=1 -> écart-type d'échantillon (équivalent np.std(x, ddof=1)).
    """
    values = np.asarray(series, dtype=float)
    n = len(values)

    # Il faut au moins ddof + 1 points pour que le dénominateur soit > 0
    if n - ddof <= 0:
        raise InsufficientDegreesOfFreedomError(
            f"Impossible d'utiliser {ddof} degré(s) de liberté sur une série de longueur {n}"
        )

    mean = values.sum() / n
    squared_deviations = np.sum((values - mean) ** 2)
    return float(np.sqrt(squared_deviations / (n - ddof)))

def mean_of_measurements(values):
    """
    Moyenne arithmétique des mesures R/S valides.
    La valeur 0 est un marqueur "fenêtre dégénérée" : elle est exclue, jamais moyennée.
    """
    samples = np.asarray(values, dtype=float)
    samples = samples[samples != 0]

    if len(samples) == 0:
        raise UndefinedWindowMeanError("Aucune mesure exploitable : la moyenne est indéfinie.")

    return float(samples.sum() / len(samples))
