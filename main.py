import sys
import logging
import argparse
from core.config import load_params, DEFAULT_CONFIG_PATH
from core.data_handler import CSVDataHandler
from core.errors import HurstError
from core.fractals import HurstEstimator, interpret_hurst

logger = logging.getLogger(__name__)

DEFAULT_INPUT_FILE = "1min_ETHUSDT.csv"

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Exposant de Hurst (analyse R/S simplifiée) d'une série de clôtures CSV.")
    p.add_argument("input_file", nargs="?", default=None, help=f"Fichier CSV (défaut : {DEFAULT_INPUT_FILE})")
    p.add_argument("--column", type=int, default=None, help="Position (0-based) de la colonne Close (défaut : 4)")
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Fichier de paramètres YAML")
    p.add_argument("--plot", default=None, metavar="PNG", help="Sauvegarde le graphique log-log dans ce fichier")
    p.add_argument("--verbose", "-v", action="store_true", help="Logs détaillés (DEBUG)")
    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    params = load_params(args.config)
    data_params = params.get("data", {}) or {}

    # Priorité : ligne de commande > fichier de config > défaut
    input_file = args.input_file or data_params.get("path", DEFAULT_INPUT_FILE)
    close_column = args.column if args.column is not None else int(data_params.get("close_column", 4))

    print(f"Input file: {input_file}")

    try:
        close_prices = CSVDataHandler(input_file, close_column).get_close_prices()
        result = HurstEstimator.from_params(params).estimate(close_prices)
    except (HurstError, FileNotFoundError) as e:
        logger.error(f"Analyse impossible : {e}")
        return 1

    print(result)
    print(f"Régime : {interpret_hurst(result.h)}")

    if args.plot:
        from core.plotting import plot_rs_fit
        plot_rs_fit(result, args.plot)
        logger.info(f"Graphique sauvegardé : {args.plot}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
