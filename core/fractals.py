import logging
import numpy as np
from scipy.stats import linregress
from core.errors import InvalidInputError, NonPositivePriceError, UndefinedWindowMeanError
from quant_maths.fractals import generate_window_sizes, simplified_rs, MIN_WINDOW, LOG_STEP, MIN_SERIES_LENGTH
from quant_maths.statistics import mean_of_measurements

logger = logging.getLogger(__name__)

class HurstResult:
    """
    Résultat de l'analyse R/S : H, c, et les points (fenêtre, R/S moyen) de la régression.
    Lecture seule : les séquences sont stockées sous forme de tuples.
    """
    def __init__(self, h, c, window_sizes, rs_means):
        if len(window_sizes) != len(rs_means):
            raise ValueError("window_sizes et rs_means doivent avoir la même longueur")
        self._h = float(h)
        self._c = float(c)
        self._window_sizes = tuple(int(w) for w in window_sizes)
        self._rs_means = tuple(float(rs) for rs in rs_means)

    @property
    def h(self):
        """Exposant de Hurst (pente de la régression log-log)."""
        return self._h

    @property
    def c(self):
        """Constante : 10^(ordonnée à l'origine)."""
        return self._c

    @property
    def window_sizes(self):
        return self._window_sizes

    @property
    def rs_means(self):
        return self._rs_means

    @property
    def points(self):
        """Paires explicites (taille de fenêtre, R/S moyen), dans l'ordre de génération."""
        return list(zip(self._window_sizes, self._rs_means))

    def __repr__(self):
        return f"HurstResult(h={self._h!r}, c={self._c!r}, window_sizes={list(self._window_sizes)!r}, rs_means={list(self._rs_means)!r})"

    def __str__(self):
        return (f"H: {self._h}, c: {self._c}, \nwindow sizes: {list(self._window_sizes)}"
                f", RS: {list(self._rs_means)}")


class HurstEstimator:
    """
    Estimateur de l'Exposant de Hurst par analyse R/S simplifiée.

    Pour chaque taille de fenêtre w (espacement log10), la série est découpée en blocs
    consécutifs de longueur w. On calcule le R/S de chaque bloc, on fait la moyenne,
    puis on régresse log10(R/S moyen) sur log10(w) :

        log10(R/S) = H * log10(w) + log10(c)

    Interprétation :
    - H < 0.5 : Mean Reverting (Anti-persistant).
    - H = 0.5 : Marche Aléatoire (Brownien).
    - H > 0.5 : Trending (Persistant).
    """
    def __init__(self, min_window=MIN_WINDOW, log_step=LOG_STEP, min_length=MIN_SERIES_LENGTH, ddof=1):
        self.min_window = min_window
        self.log_step = log_step
        self.min_length = min_length
        self.ddof = ddof

    @classmethod
    def from_params(cls, params):
        """Construit l'estimateur depuis la section 'hurst' du fichier de configuration."""
        section = (params or {}).get("hurst", {}) or {}
        return cls(
            min_window=int(section.get("min_window", MIN_WINDOW)),
            log_step=float(section.get("log_step", LOG_STEP)),
            min_length=int(section.get("min_length", MIN_SERIES_LENGTH)),
            ddof=int(section.get("ddof", 1)),
        )

    def _validate(self, series):
        """Copie en lecture seule + contrôle des invariants d'entrée."""
        values = np.array(series, dtype=float)

        if values.ndim != 1:
            raise InvalidInputError(f"La série doit être unidimensionnelle (reçu : {values.ndim} dimensions)")
        if len(values) < self.min_length:
            raise InvalidInputError(
                f"La série doit contenir au moins {self.min_length} points (reçu : {len(values)})"
            )
        if not np.all(np.isfinite(values)):
            raise InvalidInputError("La série contient des valeurs non finies (NaN ou infini)")
        if np.any(values <= 0):
            raise NonPositivePriceError("La série contient des prix nuls ou négatifs")

        values.flags.writeable = False
        return values

    def estimate(self, series):
        """Calcule H et c. Aucune sortie partielle : toute erreur remonte à l'appelant."""
        values = self._validate(series)
        n = len(values)

        # 1. Tailles de fenêtres
        window_sizes = generate_window_sizes(n, self.min_window, self.log_step, self.min_length)

        # 2. R/S moyen par taille (buffer pré-alloué, aligné index par index sur window_sizes)
        rs_means = np.empty(len(window_sizes), dtype=float)

        for i, w in enumerate(window_sizes):
            # Blocs consécutifs sans recouvrement, le reste (< w) est ignoré
            n_blocks = n // w
            rs = [simplified_rs(values[k * w:(k + 1) * w], self.ddof) for k in range(n_blocks)]

            try:
                rs_means[i] = mean_of_measurements(rs)
            except UndefinedWindowMeanError as e:
                raise UndefinedWindowMeanError(
                    f"Aucun R/S exploitable pour la fenêtre de taille {w} ({n_blocks} bloc(s) dégénéré(s))"
                ) from e

            logger.debug(f"[Hurst] w={w} : {n_blocks} blocs, R/S moyen = {rs_means[i]:.6f}")

        # 3. Régression log-log : la pente est H
        log_w = np.log10(np.array(window_sizes, dtype=float))
        log_rs = np.log10(rs_means)
        fit = linregress(log_w, log_rs)

        h = fit.slope
        c = 10 ** fit.intercept

        logger.debug(f"[Hurst] Régression : H = {h:.6f}, log10(c) = {fit.intercept:.6f}")
        return HurstResult(h, c, window_sizes, rs_means)


def estimate_hurst(series, **settings):
    """Raccourci : HurstEstimator(**settings).estimate(series)."""
    return HurstEstimator(**settings).estimate(series)

def interpret_hurst(h):
    """Étiquette qualitative de H (purement informative)."""
    if h < 0.45:
        return "Mean reverting"
    elif h > 0.55:
        return "Trending"
    else:
        return "Random walk"
