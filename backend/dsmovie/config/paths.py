from pathlib import Path


ROOT_DIR = Path(__file__).parent.parent.parent

DATA_DIR = ROOT_DIR / "data"

# seed files
SEED_MOVIES_PATH = DATA_DIR / "movies.csv"
