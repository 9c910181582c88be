import logging
from pathlib import Path
import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/params.yaml"

def load_params(path=DEFAULT_CONFIG_PATH):
    """
    Charge les paramètres YAML.
    Fichier absent -> dictionnaire vide : les valeurs par défaut du code s'appliquent.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"[Config] {path} introuvable, valeurs par défaut utilisées.")
        return {}

    with open(path, "r") as f:
        params = yaml.safe_load(f)
    return params or {}
