import numpy as np

def pct_change(series):
    """
    Rendements simples (arithmétiques) : R_t = (P_t / P_{t-1}) - 1

    La série de sortie est plus courte d'un élément que l'entrée.
    Aucune protection contre P_{t-1} = 0 : c'est à l'appelant de garantir des prix > 0.
    """
    prices = np.asarray(series, dtype=float)
    return prices[1:] / prices[:-1] - 1
