import numpy as np
import matplotlib.pyplot as plt

def plot_rs_fit(result, output_path=None):
    """
    Visualise la régression log-log : log10(R/S moyen) en fonction de log10(taille de fenêtre).
    La pente de la droite est l'Exposant de Hurst.

    Si output_path est fourni, la figure est sauvegardée (et fermée) au lieu d'être affichée.
    """
    log_w = np.log10(np.array(result.window_sizes, dtype=float))
    log_rs = np.log10(np.array(result.rs_means, dtype=float))

    # Droite ajustée : log10(R/S) = H * log10(w) + log10(c)
    fitted = result.h * log_w + np.log10(result.c)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.scatter(log_w, log_rs, color='blue', label='R/S moyen par fenêtre')
    ax.plot(log_w, fitted, color='red', linestyle='--', label=f'Régression (H = {result.h:.4f})')

    ax.set_xlabel('log10(taille de fenêtre)')
    ax.set_ylabel('log10(R/S)')
    ax.set_title('Analyse R/S simplifiée')
    ax.legend()
    ax.grid(True)

    if output_path is not None:
        fig.savefig(output_path)
        plt.close(fig)
    else:
        plt.show()

    return fig
