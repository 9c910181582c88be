import logging
from pathlib import Path
import numpy as np
import pandas as pd
from core.errors import InvalidInputError

logger = logging.getLogger(__name__)

class DataHandler:
    """
    Classe abstraite (Interface) : toute source de prix doit fournir une série ordonnée de clôtures.
    """
    def get_close_prices(self):
        raise NotImplementedError("Doit implémenter get_close_prices()")

class CSVDataHandler(DataHandler):
    """
    Lit les prix de clôture dans un fichier CSV avec ligne d'en-tête.
    La colonne est choisie par position (0-based) : 4 = 'Close' dans un fichier OHLCV
    (timestamp, open, high, low, close, volume).
    """
    def __init__(self, path, close_column=4):
        self.path = Path(path)
        self.close_column = close_column

    def get_close_prices(self):
        if not self.path.exists():
            raise FileNotFoundError(f"Fichier introuvable : {self.path}")

        logger.info(f"[DataHandler] Lecture de {self.path}...")
        try:
            df = pd.read_csv(self.path)
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            raise InvalidInputError(f"Fichier CSV illisible : {self.path} ({e})") from e

        if self.close_column < 0 or self.close_column >= df.shape[1]:
            raise InvalidInputError(
                f"Colonne {self.close_column} absente : le fichier n'a que {df.shape[1]} colonnes"
            )

        column = df.iloc[:, self.close_column]
        try:
            close = pd.to_numeric(column, errors="raise")
        except (ValueError, TypeError) as e:
            raise InvalidInputError(f"Colonne '{column.name}' non numérique : {e}") from e

        # Nettoyage : lignes vides (trous dans l'export)
        n_missing = int(close.isna().sum())
        if n_missing:
            logger.warning(f"[DataHandler] {n_missing} valeur(s) manquante(s) ignorée(s) dans '{column.name}'")
            close = close.dropna()

        logger.info(f"[DataHandler] {len(close)} prix de clôture chargés (colonne '{column.name}').")
        return close.to_numpy(dtype=np.float64)
