import math
import logging
import numpy as np
from core.errors import InvalidInputError, DegenerateRangeError
from quant_maths.returns import pct_change
from quant_maths.statistics import standard_deviation

logger = logging.getLogger(__name__)

MIN_WINDOW = 10
LOG_STEP = 0.25
MIN_SERIES_LENGTH = 100

def generate_window_sizes(n, min_window=MIN_WINDOW, log_step=LOG_STEP, min_length=MIN_SERIES_LENGTH):
    """
    Tailles de fenêtres espacées logarithmiquement entre min_window et n - 1.

    Pas de log_step (0.25) en log10, borne de départ incluse, borne de fin exclue
    si elle tombe pile sur un multiple du pas. La longueur totale n est toujours
    ajoutée en dernier (fenêtre "série complète").
    Les doublons aux petites échelles sont conservés.
    """
    if n < min_length:
        raise InvalidInputError(f"La série doit contenir au moins {min_length} points (reçu : {n})")
    if min_window < 1:
        raise InvalidInputError(f"min_window doit être >= 1 (reçu : {min_window})")
    if log_step <= 0:
        raise InvalidInputError(f"log_step doit être > 0 (reçu : {log_step})")

    max_window = n - 1
    log1 = math.log10(min_window)
    log2 = math.log10(max_window)

    # +1 car le premier élément (log1) est toujours présent
    n_elems_float = (log2 - log1) / log_step + 1
    n_elems = math.floor(n_elems_float)

    # Intervalle ouvert à droite : on retire le dernier point s'il tombe pile sur la borne
    if n_elems_float == n_elems:
        n_elems -= 1

    if n_elems <= 0:
        raise DegenerateRangeError(
            f"Plage de fenêtres vide entre {min_window} et {max_window} (pas log10 = {log_step})"
        )

    window_sizes = [int(math.floor(10 ** (log1 + i * log_step))) for i in range(n_elems)]
    window_sizes.append(n)

    logger.debug(f"[Fractals] Tailles de fenêtres : {window_sizes}")
    return window_sizes

def simplified_rs(window, ddof=1):
    """
    R/S "simplifié" d'une fenêtre de prix.

    R : amplitude exprimée en variation relative (max / min - 1), pas en écart cumulé.
    S : écart-type (ddof=1) des rendements simples de la fenêtre.

    Retourne 0 si R ou S est nul : marqueur de fenêtre dégénérée, exclu en aval.
    """
    prices = np.asarray(window, dtype=float)
    pcts = pct_change(prices)

    R = prices.max() / prices.min() - 1 # Amplitude en pourcentage
    S = standard_deviation(pcts, ddof) # np.std(pcts, ddof=1)

    if R == 0 or S == 0:
        return 0.0

    return float(R / S)
